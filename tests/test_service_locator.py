import pytest

from isaac.service_locator import ServiceLocator, ServiceNotFoundError


class Audio:
    def __init__(self, volume=1, *, muted=False):
        self.volume = volume
        self.muted = muted


class Network:
    pass


@pytest.fixture(autouse=True)
def _clean_registry():
    yield
    ServiceLocator.unregister_service(Audio)
    ServiceLocator.unregister_service(Network)


def test_register_then_get_returns_same_instance():
    service = ServiceLocator.register_service(Audio)
    assert ServiceLocator.get_service(Audio) is service


def test_arguments_are_passed_to_constructor():
    service = ServiceLocator.register_service(Audio, 5, muted=True)
    assert service.volume == 5
    assert service.muted is True


def test_missing_service_raises():
    with pytest.raises(ServiceNotFoundError, match="service 'Network' not found"):
        ServiceLocator.get_service(Network)


def test_not_found_is_runtime_error():
    with pytest.raises(RuntimeError):
        ServiceLocator.get_service(Network)


def test_registering_again_replaces_instance():
    first = ServiceLocator.register_service(Audio, 1)
    second = ServiceLocator.register_service(Audio, 2)
    assert ServiceLocator.get_service(Audio) is second
    assert first is not second


def test_unregister_returns_instance_and_forgets_it():
    service = ServiceLocator.register_service(Audio)
    assert ServiceLocator.unregister_service(Audio) is service
    with pytest.raises(ServiceNotFoundError):
        ServiceLocator.get_service(Audio)


def test_services_are_keyed_by_type():
    audio = ServiceLocator.register_service(Audio)
    network = ServiceLocator.register_service(Network)
    assert ServiceLocator.get_service(Audio) is audio
    assert ServiceLocator.get_service(Network) is network