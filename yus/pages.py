"""Server-rendered pages of the site and the router that picks them."""

from __future__ import annotations

from typing import Callable
from urllib.parse import urlsplit

STYLESHEET_HREF = "/pkg/ui.css"
CUBE_CANVAS_ID = "cube-demo-canvas"
NOT_FOUND_TEXT = "404 – not found"

Page = Callable[[], str]


def _attrs(attrs: dict[str, object]) -> str:
    return "".join(f' {name.rstrip("_")}="{value}"' for name, value in attrs.items())


def _el(tag: str, *children: str, **attrs: object) -> str:
    """An element with its children joined in order."""
    return f"<{tag}{_attrs(attrs)}>{''.join(children)}</{tag}>"


def _void(tag: str, **attrs: object) -> str:
    """A self-closing element."""
    return f"<{tag}{_attrs(attrs)}/>"


def _links(links: tuple[tuple[str, str], ...], **attrs: object) -> str:
    return "".join(_el("a", text, href=href, **attrs) for href, text in links)


_PATH_BUTTONS = (
    ("/hacker", "Enter Hacker Mode",
     "px-6 py-3 rounded-full bg-primary hover:bg-teal-600 text-white font-medium"),
    ("/classic", "Skip to Classic Site",
     "px-6 py-3 rounded-full border border-slate-300 hover:bg-slate-50"),
)


def home() -> str:
    """Landing page offering the two ways into the site."""
    buttons = "".join(
        _el("a", text, href=href, class_=style) for href, text, style in _PATH_BUTTONS
    )
    card = _el(
        "div",
        _el(
            "div",
            _void("img", src="/assets/favicon-negative.png", alt="Yus logo", class_="h-8"),
            class_="flex items-center gap-2 mb-6",
        ),
        _el("h1", "Yus Playground", class_="text-4xl font-bold mb-2"),
        _el("p", "Choose your path:", class_="mb-6 text-lg"),
        _el("div", buttons, class_="flex gap-3"),
        _el("p", "Press Y or Enter to activate Hacker Mode.",
            class_="mt-8 text-sm text-slate-500"),
        class_="mx-4 p-10 border rounded-2xl shadow-sm bg-neutral-light max-w-lg w-full",
    )
    return _el(
        "h1", "Hello!!!!!!!!!", class_="text-3xl font-bold mb-4 text-neutral-light"
    ) + _el(
        "div",
        card,
        class_="h-full flex items-center justify-center bg-neutral-dark text-slate-900",
    )


_DEMOS = (
    ("/demos/mandelbrot", "Mandelbrot"),
    ("/demos/cube", "3-D cube"),
)


def demos_menu() -> str:
    """List of the WebGPU demos."""
    items = "".join(_el("li", _el("a", title, href=href)) for href, title in _DEMOS)
    return _el("h2", "WebGPU demos", class_="text-xl font-bold mb-4") + _el(
        "ul", items, class_="list-disc pl-6"
    )


_PROJECTS = (
    ("/img/rocket.jpg", "Minecraft Rocket Mod", "GPL-3.0, Kerbal-style physics."),
) * 3

_CLASSIC_NAV = (
    ("#projects", "Projects"),
    ("/about", "About"),
    ("/contact", "Contact"),
)

_FOOTER_NAV = (
    ("#", "GitHub"),
)


def _project_card(image: str, title: str, blurb: str) -> str:
    return _el(
        "article",
        _void("img", src=image, alt="", class_="h-40 w-full object-cover"),
        _el(
            "div",
            _el("h3", title, class_="font-semibold text-lg mb-1"),
            _el("p", blurb, class_="text-sm text-slate-700"),
            class_="p-4",
        ),
        class_="bg-white rounded-xl overflow-hidden shadow",
    )


def classic_main() -> str:
    """The conventional portfolio page."""
    header = _el(
        "header",
        _el(
            "div",
            _el("a", "YUS", href="/", class_="text-2xl font-extrabold text-primary"),
            _el("nav", _links(_CLASSIC_NAV), class_="hidden md:flex gap-8 text-neutral-dark"),
            class_="max-w-6xl mx-auto flex justify-between items-center px-6 py-4",
        ),
        class_="sticky top-0 bg-neutral-light/80 backdrop-blur",
    )
    hero = _el(
        "section",
        _el(
            "h1",
            "I build things",
            _void("br", class_="hidden sm:block"),
            " you can poke.",
            class_="text-5xl sm:text-7xl font-bold text-neutral-light mb-6 leading-tight",
        ),
        _el(
            "p",
            "Rockets in Minecraft, motion rigs for wannabe rally drivers, "
            "and (coming soon) a real-life CS:GO airsoft map. Pick one ↓",
            class_="text-xl mb-10 max-w-xl text-neutral-light",
        ),
        _el(
            "a",
            "View Projects",
            href="#projects",
            class_="inline-block bg-primary text-white px-8 py-4 "
            "rounded-full hover:bg-primary transition",
        ),
        class_="py-24",
    )
    projects = _el(
        "section",
        *(_project_card(*project) for project in _PROJECTS),
        id="projects",
        class_="py-16 grid sm:grid-cols-3 gap-8",
    )
    demo = _el(
        "section",
        _el("h2", "WebGPU demo", class_="text-3xl font-bold mb-8"),
        _el(
            "div",
            _el(
                "textarea",
                id="shader",
                class_="w-full h-72 bg-neutral-dark text-neutral-light p-4 "
                "font-mono rounded-xl resize-none",
            ),
            _el("canvas", id="wgpu", class_="w-full h-72 rounded-xl border"),
            class_="grid md:grid-cols-2 gap-6",
        ),
        class_="py-20",
    )
    footer = _el(
        "footer",
        _el(
            "div",
            _el("p", "© 2025 Yus - idk yet."),
            _el(
                "nav",
                _links(_FOOTER_NAV, target="_blank"),
                _links((("/contact", "Contact"),)),
                class_="flex gap-6 underline-offset-4",
            ),
            class_="max-w-6xl mx-auto px-6 flex flex-col sm:flex-row justify-between gap-8",
        ),
        class_="bg-neutral-dark text-neutral-light py-12",
    )
    return (
        header
        + _el("main", hero, projects, demo, class_="max-w-6xl mx-auto px-6")
        + footer
        + _el("script", type="module", src="/js/demo.js")
    )


def cube_demo() -> str:
    """The canvas the interactive cube renderer attaches to."""
    return _el(
        "canvas",
        id=CUBE_CANVAS_ID,
        width=800,
        height=600,
        class_="border w-full h-[500px]",
        style="border: 1px solid red;",
    )


def not_found() -> str:
    """Fallback for paths no route matches."""
    return _el("p", NOT_FOUND_TEXT)


_SHELL_NAV = (
    ("/", "Yus"),
    ("/demos", "Demos"),
)


def app_shell(body: str) -> str:
    """Wrap a page body in the document with the shared header and footer."""
    head = _el(
        "head",
        _void("meta", charset="utf-8"),
        _void("link", rel="stylesheet", href=STYLESHEET_HREF),
    )
    page = _el(
        "body",
        _el("header", _links(_SHELL_NAV), class_="p-4 flex gap-4 bg-neutral-950 text-neutral-50"),
        _el("main", body, class_="min-h-screen p-4"),
        _el(
            "footer",
            "© 2025 Yus – curiosity compiled",
            class_="p-4 text-center bg-neutral-950 text-neutral-50",
        ),
    )
    return "<!DOCTYPE html>" + _el("html", head, page)


ROUTES: dict[str, Page] = {
    "": home,
    "/demos": demos_menu,
    "/demos/cube": cube_demo,
    "/classic": classic_main,
}


def resolve(path: str) -> Page:
    """The page for a request path; unknown paths get :func:`not_found`."""
    route = urlsplit(path).path
    if not route.startswith("/"):
        route = "/" + route
    return ROUTES.get(route.rstrip("/"), not_found)


def render(path: str) -> str:
    """The full HTML document for a request path."""
    return app_shell(resolve(path)())