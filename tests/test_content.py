from content import PORTFOLIO


def test_section_ids_start_with_hero_then_nav_order():
    assert PORTFOLIO.section_ids == [
        "hero", "about", "skills", "projects", "experience",
        "education", "certifications", "contact",
    ]


def test_skill_levels_are_percentages():
    for group in PORTFOLIO.skill_groups:
        for bar in group.bars:
            assert 0 <= bar.level <= 100


def test_subtitle_lookup():
    assert PORTFOLIO.subtitle("projects") == "Minimalist text cards with quick links."
    assert PORTFOLIO.subtitle("experience") == ""


def test_contact_links():
    labels = [l.label for l in PORTFOLIO.contact_links]
    assert labels == ["Email", "GitHub", "LinkedIn"]
    assert PORTFOLIO.contact_links[0].url.startswith("mailto:")
