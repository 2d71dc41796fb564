"""Tests for the aggregation functions."""

from datetime import datetime, timezone

import pytest

from github_site_stats.models.activity import GitHubEvent
from github_site_stats.models.repository import Repository
from github_site_stats.services.aggregator import (
    calculate_repo_stats,
    estimate_contributions_from_repos,
    format_event_action,
    get_contributions,
    get_top_repositories,
    repository_score,
    summarize_recent_activity,
)

NOW = datetime(2024, 7, 1, tzinfo=timezone.utc)


def repo(name, stars=0, forks=0, size=0, language=None, updated="2024-01-01", fork=False):
    return Repository(
        name=name,
        stargazers_count=stars,
        forks_count=forks,
        size=size,
        language=language,
        updated_at=datetime.fromisoformat(updated).replace(tzinfo=timezone.utc),
        is_fork=fork,
    )


def event(event_type, created="2024-05-01T00:00:00+00:00", payload=None):
    return GitHubEvent(
        type=event_type,
        repo="octocat/repo",
        created_at=datetime.fromisoformat(created),
        payload=payload or {},
    )


class TestCalculateRepoStats:
    """Tests for calculate_repo_stats."""

    def test_empty(self):
        """Test all sums are zero for no repositories."""
        stats = calculate_repo_stats([])

        assert stats.total_stars == 0
        assert stats.total_forks == 0
        assert stats.total_size == 0
        assert stats.top_languages == []

    def test_sums(self):
        """Test totals are plain sums over every repository, forks included."""
        repos = [
            repo("a", stars=5, forks=1, size=100),
            repo("b", stars=7, forks=0, size=20, fork=True),
            repo("c", stars=0, forks=3, size=3),
        ]

        stats = calculate_repo_stats(repos)

        assert stats.total_stars == 12
        assert stats.total_forks == 4
        assert stats.total_size == 123

    def test_languages_ranked_by_count(self):
        """Test languages are ordered by descending repository count."""
        repos = [
            repo("a", language="Go"),
            repo("b", language="Python"),
            repo("c", language="Python"),
            repo("d", language="Rust"),
            repo("e", language="Python"),
            repo("f", language="Go"),
        ]

        stats = calculate_repo_stats(repos)

        assert [(lang.name, lang.count) for lang in stats.top_languages] == [
            ("Python", 3),
            ("Go", 2),
            ("Rust", 1),
        ]

    def test_ties_keep_first_seen_order(self):
        """Test equal counts keep the order languages first appeared in."""
        repos = [
            repo("a", language="Ruby"),
            repo("b", language="C"),
            repo("c", language="Java"),
            repo("d", language="C"),
            repo("e", language="Ruby"),
        ]

        stats = calculate_repo_stats(repos)

        assert [lang.name for lang in stats.top_languages] == ["Ruby", "C", "Java"]

    def test_at_most_five_languages(self):
        """Test the breakdown is truncated to five languages."""
        names = ["A", "B", "C", "D", "E", "F", "G"]
        repos = [repo(f"r{i}", language=name) for i, name in enumerate(names)]

        stats = calculate_repo_stats(repos)

        assert len(stats.top_languages) == 5
        assert [lang.name for lang in stats.top_languages] == names[:5]

    def test_percentage_uses_all_repositories(self):
        """Test percentages are relative to every repository, with or without language."""
        repos = [
            repo("a", language="Python"),
            repo("b", language="Python"),
            repo("c", language="Go"),
            repo("d"),
            repo("e"),
            repo("f"),
        ]

        stats = calculate_repo_stats(repos)

        assert [lang.percentage for lang in stats.top_languages] == [33.3, 16.7]
        assert sum(lang.percentage for lang in stats.top_languages) <= 100

    def test_percentage_halves_round_up(self):
        """Test exact .x5 shares round away from zero, e.g. 1 of 16 is 6.3."""
        repos = [repo("go", language="Go")]
        repos += [repo(f"rust-{i}", language="Rust") for i in range(5)]
        repos += [repo(f"plain-{i}") for i in range(10)]

        stats = calculate_repo_stats(repos)

        assert [(lang.name, lang.percentage) for lang in stats.top_languages] == [
            ("Rust", 31.3),
            ("Go", 6.3),
        ]


class TestGetTopRepositories:
    """Tests for get_top_repositories."""

    def test_example_ranking(self):
        """Test forks are excluded and the newer of two equal-star repos ranks first."""
        repos = [
            repo("a", stars=5, updated="2024-01-01"),
            repo("b", stars=5, updated="2024-06-01"),
            repo("c", stars=100, fork=True, updated="2024-01-01"),
        ]

        featured = get_top_repositories(repos)

        assert [r.name for r in featured] == ["b", "a"]

    def test_score_formula(self):
        """Test score is stars times ten plus epoch milliseconds over 1e9."""
        score = repository_score(repo("a", stars=5, updated="2024-01-01"))

        assert score == pytest.approx(50 + 1704067200000 / 1_000_000_000)

    def test_missing_update_scores_stars_only(self):
        assert repository_score(Repository(name="x", stargazers_count=2)) == 20

    def test_length_is_min_of_count_and_candidates(self):
        """Test the result length is bounded by count and by non-fork repositories."""
        repos = [repo(f"r{i}", stars=i) for i in range(10)] + [repo("f", fork=True)]

        assert len(get_top_repositories(repos)) == 6
        assert len(get_top_repositories(repos, count=3)) == 3
        assert len(get_top_repositories(repos, count=20)) == 10
        assert get_top_repositories([repo("f", fork=True)]) == []

    def test_sorted_by_score(self):
        """Test output is in descending score order."""
        repos = [
            repo("a", stars=1, updated="2023-01-01"),
            repo("b", stars=9, updated="2020-01-01"),
            repo("c", stars=1, updated="2024-01-01"),
            repo("d", stars=4, updated="2022-01-01"),
        ]
        by_name = {r.name: r for r in repos}

        featured = get_top_repositories(repos)
        scores = [repository_score(by_name[r.name]) for r in featured]

        assert scores == sorted(scores, reverse=True)
        assert [r.name for r in featured] == ["c", "a", "d", "b"]

    def test_projection_fields(self):
        """Test the projection carries display fields."""
        featured = get_top_repositories(
            [
                Repository(
                    name="proj",
                    description="desc",
                    html_url="https://github.com/u/proj",
                    stargazers_count=3,
                    forks_count=2,
                    language="Go",
                    topics=["cli"],
                )
            ]
        )[0]

        assert featured.url == "https://github.com/u/proj"
        assert featured.stars == 3
        assert featured.forks == 2
        assert featured.topics == ["cli"]


class TestContributionEstimates:
    """Tests for the approximate contribution counts."""

    def test_from_events(self):
        """Test this year's events count double and all events count tenfold."""
        events = [
            event("PushEvent", "2024-03-01T00:00:00+00:00"),
            event("PushEvent", "2024-06-01T00:00:00+00:00"),
            event("WatchEvent", "2023-12-31T00:00:00+00:00"),
        ]

        estimate = get_contributions(events, now=NOW)

        assert estimate.this_year == 4
        assert estimate.total == 30

    def test_from_no_events(self):
        """Test an empty feed gives a zero estimate."""
        estimate = get_contributions([], now=NOW)

        assert estimate.this_year == 0
        assert estimate.total == 0

    def test_from_repos(self):
        """Test fifteen per repository updated this year."""
        repos = [
            repo("a", updated="2024-02-01"),
            repo("b", updated="2024-06-30"),
            repo("c", updated="2023-06-30"),
            Repository(name="d"),
        ]

        assert estimate_contributions_from_repos(repos, now=NOW) == 30


class TestFormatEventAction:
    """Tests for format_event_action."""

    def test_push(self):
        assert format_event_action(event("PushEvent", payload={"size": 3})) == "Pushed 3 commit(s)"

    def test_push_without_size_counts_commits(self):
        action = format_event_action(event("PushEvent", payload={"commits": [{}, {}]}))
        assert action == "Pushed 2 commit(s)"

    def test_create(self):
        action = format_event_action(event("CreateEvent", payload={"ref_type": "branch"}))
        assert action == "Created branch"

    def test_issues_and_pull_requests(self):
        assert format_event_action(event("IssuesEvent", payload={"action": "opened"})) == "opened issue"
        assert (
            format_event_action(event("PullRequestEvent", payload={"action": "closed"}))
            == "closed pull request"
        )

    def test_fixed_phrases(self):
        assert format_event_action(event("WatchEvent")) == "Starred repository"
        assert format_event_action(event("ForkEvent")) == "Forked repository"
        assert format_event_action(event("IssueCommentEvent")) == "Commented on issue"
        assert format_event_action(event("PullRequestReviewEvent")) == "Reviewed pull request"

    def test_unknown_type_returned_verbatim(self):
        """Test unrecognized event types come back unchanged."""
        assert format_event_action(event("GollumEvent")) == "GollumEvent"
        assert format_event_action(event("SomethingNewEvent")) == "SomethingNewEvent"


class TestSummarizeRecentActivity:
    """Tests for summarize_recent_activity."""

    def test_first_five(self):
        """Test only the first five events are kept, in feed order."""
        events = [event("WatchEvent", f"2024-05-{day:02d}T00:00:00+00:00") for day in range(10, 1, -1)]

        items = summarize_recent_activity(events)

        assert len(items) == 5
        assert items[0].created.day == 10
        assert items[0].action == "Starred repository"
        assert items[0].repo == "octocat/repo"
