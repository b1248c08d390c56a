from isaac.game_object import GameObject
from isaac.scene import Scene, SceneManager


class Marker(GameObject):
    pass


def test_root_is_stable_game_object():
    scene = Scene()
    root_id = scene.root.id
    child = scene.root.make_child(Marker)
    assert scene.root.id == root_id
    assert scene.root.children == [child]


def test_scenes_have_distinct_roots():
    first = Scene()
    second = Scene()
    assert second.root.id > first.root.id


def test_children_hang_from_root():
    scene = Scene()
    child = scene.root.make_child(Marker)
    assert scene.root.children == [child]


def test_manager_starts_empty():
    assert SceneManager().current_scene is None


def test_create_default_scene():
    manager = SceneManager()
    scene = manager.create_default_scene()
    assert manager.current_scene is scene
    assert scene.root.children == []


def test_set_scene_replaces_current():
    manager = SceneManager()
    manager.create_default_scene()
    scene = Scene()
    manager.set_scene(scene)
    assert manager.current_scene is scene
    manager.set_scene(None)
    assert manager.current_scene is None