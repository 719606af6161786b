import io

from spacewar.multiplayer_scene import MultiplayerScene


def test_no_next_scene_before_update():
    scene = MultiplayerScene(None, io.StringIO(""), io.StringIO())
    assert scene.next_scene() == ""


def test_update_prompts_and_returns_to_menu():
    out = io.StringIO()
    scene = MultiplayerScene(None, io.StringIO("\n\n"), out)
    scene.update()
    assert out.getvalue() == "multiplayer Scene: Press Enter to Return to Menu...\n"
    assert scene.next_scene() == "menu"


def test_update_consumes_a_line_and_one_character():
    stdin = io.StringIO("ignored line\nxyz")
    scene = MultiplayerScene(None, stdin, io.StringIO())
    scene.update()
    assert stdin.read() == "yz"


def test_update_at_end_of_input_still_returns_to_menu():
    scene = MultiplayerScene(None, io.StringIO(""), io.StringIO())
    scene.update()
    assert scene.next_scene() == "menu"