from eggshot.menu import BUTTON, FONT_PATH, NODE, TEXT, MenuNode, spawn_menu


def test_root_covers_screen_and_is_main_menu():
    root = spawn_menu()
    assert root.kind == NODE
    assert root.main_menu is True
    assert (root.width, root.height) == ("100%", "100%")
    assert root.background == (0.0, 0.0, 0.0)


def test_title_text():
    title = spawn_menu().children[0]
    assert title.kind == TEXT
    assert title.text == "EGGSHOT"
    assert title.font_size == 64.0
    assert title.margin_bottom == 20.0
    assert title.color == (1.0, 1.0, 1.0)


def test_play_button():
    button = spawn_menu().children[1]
    assert button.kind == BUTTON
    assert (button.width, button.height) == ("200px", "65px")
    [label] = button.children
    assert label.text == "Play"
    assert label.font_size == 32.0
    assert label.color == (0.0, 0.0, 0.0)


def test_walk_is_depth_first():
    root = spawn_menu()
    nodes = list(root.walk())
    assert nodes[0] is root
    assert [n.text for n in nodes if n.kind == TEXT] == ["EGGSHOT", "Play"]
    assert len(nodes) == 4


def test_all_text_shares_font():
    fonts = {n.font for n in spawn_menu().walk() if n.kind == TEXT}
    assert fonts == {FONT_PATH}


def test_walk_single_node():
    node = MenuNode(TEXT, text="x")
    assert list(node.walk()) == [node]