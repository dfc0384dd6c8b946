"""Tests for from_dict() decoding and CursorPage paging."""

from vtcore._types import (
    AnalysisReport,
    AnalysisStats,
    AnalysisSubmission,
    Comment,
    CursorPage,
    IPAddressAttributes,
    URLAttributes,
    Verdict,
    Vote,
    comment_envelope,
    vote_envelope,
)


class TestAnalysisReport:
    def test_minimal(self):
        report = AnalysisReport.from_dict(
            {"id": "1.1.1.1", "type": "ip_address"}, IPAddressAttributes.from_dict
        )
        assert report.id == "1.1.1.1"
        assert report.attributes.tags == []
        assert report.attributes.reputation == 0
        assert report.attributes.last_analysis_stats == AnalysisStats()
        assert report.links == {}

    def test_case_insensitive_keys(self):
        report = AnalysisReport.from_dict(
            {
                "ID": "x",
                "Type": "url",
                "Attributes": {"URL": "http://a", "Last_Analysis_Stats": {"Malicious": 3}},
            },
            URLAttributes.from_dict,
        )
        assert report.id == "x"
        assert report.type == "url"
        assert report.attributes.url == "http://a"
        assert report.attributes.last_analysis_stats.malicious == 3

    def test_url_final_url(self):
        attrs = URLAttributes.from_dict({"last_final_url": "https://a/"})
        assert attrs.final_url == "https://a/"


class TestCommentAndVote:
    def test_comment(self):
        c = Comment.from_dict(
            {"id": "c1", "attributes": {"text": "bad #phishing", "tags": ["phishing"], "date": 1}}
        )
        assert c.text == "bad #phishing"
        assert c.tags == ["phishing"]
        assert c.votes == {}

    def test_vote(self):
        v = Vote.from_dict({"id": "v1", "attributes": {"verdict": "malicious", "value": -1}})
        assert v.verdict == "malicious"
        assert v.value == -1
        assert v.date is None

    def test_submission_default_type(self):
        assert AnalysisSubmission.from_dict({"id": "abc"}) == AnalysisSubmission("abc", "analysis")

    def test_outbound_envelopes(self):
        assert comment_envelope("hi") == {"data": {"type": "comment", "attributes": {"text": "hi"}}}
        assert vote_envelope(Verdict.HARMLESS) == {
            "data": {"type": "vote", "attributes": {"verdict": "harmless"}}
        }


class TestCursorPage:
    def test_single_page(self):
        page = CursorPage(data=[1, 2])
        assert page.has_more is False
        assert list(page.auto_paging_iter()) == [1, 2]

    def test_multi_page(self):
        seen = []

        def fetch_next(**kw):
            seen.append(kw["cursor"])
            if kw["cursor"] == "a":
                return CursorPage(data=[3], cursor="b", _fetch_next=fetch_next)
            return CursorPage(data=[4], _fetch_next=fetch_next)

        page = CursorPage(data=[1, 2], cursor="a", _fetch_next=fetch_next)
        assert list(page.auto_paging_iter()) == [1, 2, 3, 4]
        assert seen == ["a", "b"]

    def test_no_fetcher_stops(self):
        page = CursorPage(data=[1], cursor="a")
        assert list(page.auto_paging_iter()) == [1]
