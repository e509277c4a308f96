import pytest

from yus.pages import (
    CUBE_CANVAS_ID,
    NOT_FOUND_TEXT,
    app_shell,
    classic_main,
    cube_demo,
    demos_menu,
    home,
    not_found,
    render,
    resolve,
)


@pytest.mark.parametrize(
    "path, page",
    [
        ("/", home),
        ("", home),
        ("/demos", demos_menu),
        ("/demos/", demos_menu),
        ("/demos?tab=1", demos_menu),
        ("/demos/cube", cube_demo),
        ("/classic", classic_main),
        ("classic", classic_main),
    ],
)
def test_resolve_known_routes(path, page):
    assert resolve(path) is page


@pytest.mark.parametrize("path", ["/nope", "/demos/mandelbrot", "/hacker", "/classic/x"])
def test_resolve_unknown_routes(path):
    assert resolve(path) is not_found


def test_not_found_text():
    assert NOT_FOUND_TEXT in not_found()
    assert NOT_FOUND_TEXT in render("/missing")


def test_app_shell_wraps_body():
    doc = app_shell("<p>BODY</p>")
    assert doc.startswith("<!DOCTYPE html>")
    assert "<p>BODY</p>" in doc
    assert 'href="/pkg/ui.css"' in doc
    assert doc.index('<a href="/">Yus</a>') < doc.index('<a href="/demos">Demos</a>')
    assert doc.index("<p>BODY</p>") < doc.index("curiosity compiled")


def test_render_includes_page():
    assert home() in render("/")
    assert cube_demo() in render("/demos/cube")


def test_home_links():
    page = home()
    assert 'href="/hacker"' in page
    assert 'href="/classic"' in page
    assert "/assets/favicon-negative.png" in page


def test_demos_menu_lists_demos_in_order():
    page = demos_menu()
    assert page.index("/demos/mandelbrot") < page.index("/demos/cube")
    assert page.count("<li>") == 2


def test_cube_demo_canvas():
    page = cube_demo()
    assert f'id="{CUBE_CANVAS_ID}"' in page
    assert 'width="800"' in page
    assert 'height="600"' in page


def test_classic_page_sections():
    page = classic_main()
    assert page.count("<article") == 3
    assert page.count("Minecraft Rocket Mod") == 3
    assert 'id="projects"' in page
    assert 'id="wgpu"' in page
    assert "/js/demo.js" in page