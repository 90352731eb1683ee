"""Tests for the link section renderer."""

from vocab_notes import (
    HtmlFormatter,
    TextFormatter,
    build_link_groups,
    parse_groups,
    render,
)

BASE = "https://www.wanikani.com/vocabulary/"


class TestHtmlRender:
    def test_single_entry_link(self):
        html = render(parse_groups("大変（たいへん）Serious"))
        assert html == (
            f'<a href="{BASE}大変" style="margin-right: 15px;" target="_blank" '
            'rel="noopener noreferrer">大変</a>'
        )

    def test_current_subject_is_greyed(self, context):
        html = render(parse_groups("大変（たいへん）Serious", context=context))
        assert 'style="margin-right: 15px;color: #666666;"' in html

    def test_groups_joined_with_note_delimiter(self, br_config):
        groups = parse_groups("a（x）<br><br>b（y）", config=br_config)
        html = render(groups, config=br_config)
        parts = html.split("<br>")
        assert len(parts) == 2
        assert all(part.startswith("<a ") for part in parts)

    def test_links_within_group_are_concatenated(self):
        html = render(parse_groups("a（）\nb（）"))
        assert "</a><a " in html
        assert "\n" not in html

    def test_group_separator_override(self):
        groups = parse_groups("a（）\n\nb（）")
        html = render(groups, formatter=HtmlFormatter(group_separator="<br>"))
        assert html.count("<br>") == 1

    def test_groups_without_links_are_dropped(self):
        assert render(parse_groups("木（not on WK）Tree")) == ""

    def test_unlinked_group_keeps_copy_link(self):
        groups = build_link_groups(parse_groups("木（not on WK）Tree"))
        html = render(groups)
        assert ">Copy (no links)</a>" in html
        assert "wanikani.com" not in html

    def test_all_link_opens_every_target(self):
        html = render(build_link_groups(parse_groups("深刻（しんこく）\n真剣（しんけん）")))
        assert (
            f"onclick=\"window.open('{BASE}深刻', '_blank');"
            f"window.open('{BASE}真剣', '_blank');return false;\">All</a>"
        ) in html

    def test_copy_link_writes_clipboard(self):
        html = render(build_link_groups(parse_groups("深刻（しんこく）Grave")))
        assert (
            "onclick=\"navigator.clipboard.writeText('深刻（しんこく）Grave');"
            "return false;\">Copy</a>"
        ) in html

    def test_label_is_escaped(self):
        html = render(parse_groups("<b>（）"))
        assert ">&lt;b&gt;</a>" in html

    def test_everything_group_is_last(self, sample_note, context):
        groups = build_link_groups(parse_groups(sample_note, context=context), context=context)
        html = render(groups)
        assert html.split("\n")[-1].endswith(">Everything</a>")
        assert len(html.split("\n")) == 4

    def test_idempotent(self, sample_note):
        groups = build_link_groups(parse_groups(sample_note))
        assert render(groups) == render(groups)

    def test_empty(self):
        assert render([]) == ""


class TestTextRender:
    def test_entries_and_actions(self, context):
        groups = build_link_groups(
            parse_groups("大変（たいへん）\n深刻（しんこく）", context=context),
            context=context,
        )
        text = render(groups, formatter=TextFormatter())
        assert text.split("\n") == [
            f"大変 * <{BASE}大変>",
            f"深刻 <{BASE}深刻>",
            f"[All] {BASE}深刻",
            "[Copy]",
            "大変（たいへん）",
            "深刻（しんこく）",
        ]

    def test_groups_separated_by_blank_line(self):
        text = render(parse_groups("a（）\n\nb（）"), formatter=TextFormatter())
        assert text == f"a <{BASE}a>\n\nb <{BASE}b>"

    def test_copy_lines_are_unescaped(self, br_config):
        note = "It's（x）a<br>木（not on WK）Tree"
        groups = build_link_groups(parse_groups(note, config=br_config), config=br_config)
        text = render(groups, config=br_config, formatter=TextFormatter())
        assert text.split("\n")[-3:] == ["[Copy]", "It's（x）a", "木（not on WK）Tree"]
