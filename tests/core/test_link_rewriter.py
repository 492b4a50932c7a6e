"""Tests for the semantic link rewriter."""

import time

import pytest

from catalogue.core.link_rewriter import SemanticLinkRewriter, fold_term, rewrite


class TestDecodeLinkText:
    """Tests for decoding existing link text."""

    def test_encoded_text_decoded(self, rewriter: SemanticLinkRewriter) -> None:
        """Percent-encoded display text is decoded; the destination is kept."""
        result = rewriter.decode_link_text("Try [cacio%20e%20pepe](dish://cacio%20e%20pepe).")
        assert result == "Try [cacio e pepe](dish://cacio%20e%20pepe)."

    def test_non_ascii(self, rewriter: SemanticLinkRewriter) -> None:
        """Decoded text may contain non-ASCII characters."""
        result = rewriter.decode_link_text("[Dom%20Luís](place://Dom%20Luís)")
        assert result == "[Dom Luís](place://Dom%20Luís)"

    def test_multiple_links(self, rewriter: SemanticLinkRewriter) -> None:
        """Every link is processed without offset drift."""
        text = "[a%20b](place://a%20b) and [c%20d](dish://c%20d) and [e](cuisine://e)"
        assert rewriter.decode_link_text(text) == (
            "[a b](place://a%20b) and [c d](dish://c%20d) and [e](cuisine://e)"
        )

    def test_malformed_escape_left_alone(self, rewriter: SemanticLinkRewriter) -> None:
        """Text that does not decode is left as written."""
        assert rewriter.decode_link_text("[100%](dish://x)") == "[100%](dish://x)"

    def test_other_schemes_left_alone(self, rewriter: SemanticLinkRewriter) -> None:
        """Only semantic destinations are touched."""
        text = "[a%20b](https://example.com)"
        assert rewriter.decode_link_text(text) == text


class TestBareReferences:
    """Tests for wrapping bare references."""

    def test_wraps_with_decoded_term(self, rewriter: SemanticLinkRewriter) -> None:
        """A bare reference becomes a markdown link with decoded text."""
        result = rewriter.rewrite("Explore landscape://the%20Alps next")
        assert result == "Explore [the Alps](landscape://the%20Alps) next"

    def test_glued_reference_gets_leading_space(self, rewriter: SemanticLinkRewriter) -> None:
        """A non-space character before the reference gets a space inserted."""
        assert rewriter.rewrite("see:place://Porto") == "see: [Porto](place://Porto)"

    def test_glued_underscore_emphasis(self, rewriter: SemanticLinkRewriter) -> None:
        """An underscore right before the scheme still allows a match."""
        assert rewriter.rewrite("_Lisbon_place://Lisbon") == "_[Lisbon](place://Lisbon)_"

    def test_trailing_space_before_closing_paren(self, rewriter: SemanticLinkRewriter) -> None:
        """A non-space character after the reference gets a space inserted."""
        assert rewriter.rewrite("(see place://Porto)") == "(see [Porto](place://Porto) )"

    def test_link_destination_skipped(self, rewriter: SemanticLinkRewriter) -> None:
        """A reference directly after "(" is already a destination."""
        assert rewriter.rewrite("(place://Porto)") == "(place://Porto)"
        assert rewriter.rewrite("[Lisbon](place://Lisbon)") == "[Lisbon](place://Lisbon)"

    def test_reference_as_link_text_skipped(self, rewriter: SemanticLinkRewriter) -> None:
        """A reference written as link text is not wrapped again."""
        text = "[place://Lisbon](place://Lisbon)"
        assert rewriter.rewrite(text) == text

    def test_several_references(self, rewriter: SemanticLinkRewriter) -> None:
        """Multiple references are all wrapped."""
        result = rewriter.rewrite("place://Porto and place://Lisbon")
        assert result == "[Porto](place://Porto) and [Lisbon](place://Lisbon)"

    def test_undecodable_token_displayed_raw(self, rewriter: SemanticLinkRewriter) -> None:
        """A token with a malformed escape is shown as written."""
        assert rewriter.rewrite("dish://100%") == "[100%](dish://100%)"

    def test_empty_authority_left_alone(self, rewriter: SemanticLinkRewriter) -> None:
        """A reference without a term is not linked."""
        text = "Go to place:///nowhere now"
        assert rewriter.rewrite(text) == text

    @pytest.mark.parametrize(
        "text",
        [
            "Check weather://Lisbon before leaving",
            "[Lisbon](weather://Lisbon%20today)",
            "https://example.com/place",
            "Check myplace://Lisbon now",
            "Meet at workplace://HQ",
            "notadish://x and x-place://y and web.cuisine://z",
        ],
    )
    def test_unknown_schemes_untouched(self, rewriter: SemanticLinkRewriter, text: str) -> None:
        """References with unrecognised schemes pass through both passes."""
        assert rewriter.rewrite(text) == text


class TestDuplicateMentions:
    """Tests for collapsing a mention and its reference."""

    def test_plain_mention(self, rewriter: SemanticLinkRewriter) -> None:
        """A plain word matching the term merges into the link."""
        result = rewriter.rewrite("Visit Lisbon place://Lisbon today")
        assert result == "Visit [Lisbon](place://Lisbon) today"

    def test_strong_mention(self, rewriter: SemanticLinkRewriter) -> None:
        """Bold mentions keep their emphasis around the link."""
        result = rewriter.rewrite("**Afonso I**place://Afonso%20I")
        assert result == "**[Afonso I](place://Afonso%20I)**"

    def test_italic_mention_with_spaces(self, rewriter: SemanticLinkRewriter) -> None:
        """Italic mentions followed by spaces also collapse."""
        result = rewriter.rewrite("*Francesinha*  dish://Francesinha")
        assert result == "*[Francesinha](dish://Francesinha)*"

    def test_underscore_mention(self, rewriter: SemanticLinkRewriter) -> None:
        """Underscore emphasis is preserved."""
        result = rewriter.rewrite("_Douro Valley_ landscape://Douro%20Valley")
        assert result == "_[Douro Valley](landscape://Douro%20Valley)_"

    def test_multi_word_plain_mention(self, rewriter: SemanticLinkRewriter) -> None:
        """Only the trailing words matching the term are merged."""
        result = rewriter.rewrite("Walk across Dom Luís place://Dom%20Lu%C3%ADs today")
        assert result == "Walk across [Dom Luís](place://Dom%20Lu%C3%ADs) today"

    def test_case_and_diacritic_insensitive(self, rewriter: SemanticLinkRewriter) -> None:
        """Comparison ignores case and accents; the decoded term is displayed."""
        result = rewriter.rewrite("Visit LISBOA place://Lisb%C3%B3a")
        assert result == "Visit [Lisbóa](place://Lisb%C3%B3a)"

    def test_different_word_not_merged(self, rewriter: SemanticLinkRewriter) -> None:
        """A preceding word that differs is kept."""
        result = rewriter.rewrite("Visit Porto place://Lisbon")
        assert result == "Visit Porto [Lisbon](place://Lisbon)"

    def test_different_emphasis_not_merged(self, rewriter: SemanticLinkRewriter) -> None:
        """A preceding emphasized phrase that differs is kept."""
        result = rewriter.rewrite("**Porto** place://Lisbon")
        assert result == "**Porto** [Lisbon](place://Lisbon)"

    def test_not_merged_across_lines(self, rewriter: SemanticLinkRewriter) -> None:
        """A mention on the previous line is left alone."""
        result = rewriter.rewrite("Lisbon\nplace://Lisbon")
        assert result == "Lisbon\n[Lisbon](place://Lisbon)"

    def test_previous_link_not_consumed(self, rewriter: SemanticLinkRewriter) -> None:
        """An earlier replacement is never merged into a later one."""
        result = rewriter.rewrite("Lisbon place://Lisbon place://Lisbon")
        assert result == "[Lisbon](place://Lisbon) [Lisbon](place://Lisbon)"

    def test_collapse_disabled(self) -> None:
        """With collapsing off, mentions are kept and the reference is wrapped."""
        rewriter = SemanticLinkRewriter(collapse_duplicates=False)
        result = rewriter.rewrite("Visit Lisbon place://Lisbon today")
        assert result == "Visit Lisbon [Lisbon](place://Lisbon) today"


class TestIdempotence:
    """Tests for rewrite(rewrite(s)) == rewrite(s)."""

    @pytest.mark.parametrize(
        "text",
        [
            "Visit Lisbon place://Lisbon today",
            "**Afonso I**place://Afonso%20I",
            "Explore landscape://the%20Alps and dish://cacio%20e%20pepe.",
            "[Dom%20Luís](place://Dom%20Luís) crosses the river",
            "see:place://Porto",
            "No references at all.",
        ],
    )
    def test_idempotent(self, rewriter: SemanticLinkRewriter, text: str) -> None:
        """A second rewrite changes nothing."""
        once = rewriter.rewrite(text)
        assert rewriter.rewrite(once) == once


class TestHelpers:
    """Tests for module helpers."""

    def test_fold_term(self) -> None:
        """Folding drops case, accents and extra whitespace."""
        assert fold_term("  São   Bento ") == "sao bento"

    def test_module_rewrite_reads_settings(self, monkeypatch) -> None:
        """CATALOGUE_REWRITER_COLLAPSE_DUPLICATES configures the default rewriter."""
        monkeypatch.setenv("CATALOGUE_REWRITER_COLLAPSE_DUPLICATES", "false")
        assert rewrite("Lisbon place://Lisbon") == "Lisbon [Lisbon](place://Lisbon)"


class TestLargeInput:
    """Tests for rewriting long markdown."""

    def test_long_prose_after_link(self, rewriter: SemanticLinkRewriter) -> None:
        """Lookback before a reference stays linear in the preceding text."""
        prose = "word " * 20000
        text = prose + "[x](https://e.com) end place://Lisbon"

        started = time.perf_counter()
        result = rewriter.rewrite(text)
        elapsed = time.perf_counter() - started

        assert result == prose + "[x](https://e.com) end [Lisbon](place://Lisbon)"
        assert elapsed < 2.0

    def test_many_references_in_long_text(self, rewriter: SemanticLinkRewriter) -> None:
        """Every reference in a long block is wrapped."""
        text = "*a* (b) _c_ place://Porto\n" * 2000
        result = rewriter.rewrite(text)
        assert result == "*a* (b) _c_ [Porto](place://Porto)\n" * 2000
