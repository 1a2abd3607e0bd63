from navigator import SectionNavigator, anchors_in

PAGE = """
<html><body>
  <section id="hero"></section>
  <section id="about"><h2>About</h2></section>
  <div><section id="contact"></section></div>
</body></html>
"""


def test_anchors_in_document_order():
    assert anchors_in(PAGE) == ["hero", "about", "contact"]


def test_scroll_to_known_section():
    scrolled = []
    nav = SectionNavigator.from_html(PAGE, scrolled.append)
    assert nav.scroll_to("about") is True
    assert scrolled == ["about"]


def test_unknown_section_is_a_silent_no_op():
    scrolled = []
    nav = SectionNavigator(["hero"], scrolled.append)
    assert nav.scroll_to("missing") is False
    assert scrolled == []
