"""Tests for perch.items — Link, Html and ActivatableMixin."""

from kida.template import Markup

from perch.items.activatable import ActivatableMixin
from perch.items.html import Html
from perch.items.link import Link


class TestLink:
    def test_to(self) -> None:
        link = Link.to("/about", "About")
        assert link.url() == "/about"
        assert link.text() == "About"

    def test_render(self) -> None:
        assert Link.to("/about", "About").render() == '<a href="/about">About</a>'

    def test_render_with_attributes(self) -> None:
        link = Link.to("/about", "About").add_class("nav-link").set_attribute("rel", "nofollow")
        assert link.render() == '<a href="/about" rel="nofollow" class="nav-link">About</a>'

    def test_text_escaped(self) -> None:
        assert Link.to("/", "<b>Home</b>").render() == '<a href="/">&lt;b&gt;Home&lt;/b&gt;</a>'

    def test_markup_text_not_escaped(self) -> None:
        link = Link.to("/inbox", Markup('Inbox <span class="badge">3</span>'))
        assert link.render() == '<a href="/inbox">Inbox <span class="badge">3</span></a>'

    def test_url_escaped(self) -> None:
        assert Link.to('/"x"', "X").render() == '<a href="/&quot;x&quot;">X</a>'

    def test_inactive_by_default(self) -> None:
        assert Link.to("/", "Home").is_active() is False

    def test_no_parent_attributes_by_default(self) -> None:
        assert Link.to("/", "Home").parent_attributes() == {}

    def test_repr(self) -> None:
        assert repr(Link.to("/", "Home")) == "Link('/', 'Home')"


class TestLinkPrefix:
    def test_prefix(self) -> None:
        assert Link.to("/about", "About").prefix("/en").url() == "/en/about"

    def test_prefix_trailing_slash(self) -> None:
        assert Link.to("users", "Users").prefix("/admin/").url() == "/admin/users"

    def test_prefix_root(self) -> None:
        assert Link.to("/", "Home").prefix("/admin").url() == "/admin"

    def test_prefix_slash_on_root(self) -> None:
        assert Link.to("/", "Home").prefix("/").url() == "/"

    def test_prefix_twice(self) -> None:
        assert Link.to("/x", "X").prefix("/b").prefix("/a").url() == "/a/b/x"


class TestHtml:
    def test_raw_render(self) -> None:
        assert Html.raw("<hr>").render() == "<hr>"

    def test_render_is_markup(self) -> None:
        assert hasattr(Html.raw("<hr>").render(), "__html__")

    def test_never_active(self) -> None:
        assert Html.raw("<hr>").is_active() is False

    def test_repr(self) -> None:
        assert repr(Html.raw("<hr>")) == "Html('<hr>')"


class Toggle(ActivatableMixin):
    pass


class TestActivatableMixin:
    def test_default_inactive(self) -> None:
        assert Toggle().is_active() is False

    def test_set_active(self) -> None:
        assert Toggle().set_active().is_active() is True

    def test_set_active_false(self) -> None:
        assert Toggle().set_active(False).is_active() is False

    def test_set_inactive(self) -> None:
        assert Toggle().set_active().set_inactive().is_active() is False

    def test_callable_evaluated_each_call(self) -> None:
        state = {"on": False}
        toggle = Toggle().set_active(lambda: state["on"])
        assert toggle.is_active() is False
        state["on"] = True
        assert toggle.is_active() is True

    def test_instances_independent(self) -> None:
        first = Toggle().set_active()
        assert Toggle().is_active() is False
        assert first.is_active() is True


class TestHtmlAttributes:
    def test_parent_attributes_only(self) -> None:
        html = Html.raw("<hr>").add_parent_class("divider")
        assert html.parent_attributes() == {"class": "divider"}
        assert not hasattr(html, "add_class")
        assert not hasattr(html, "set_attribute")

    def test_markup_rendered_verbatim(self) -> None:
        assert Html.raw('<hr class="x">').add_parent_class("divider").render() == '<hr class="x">'
