from datetime import date, timedelta

from stridemind.agg.buckets import (
    four_week_label,
    year_label,
    recent_window,
    historical_windows,
    plan_buckets,
    records_in_window,
    partition_records,
)

ANCHOR = date(2024, 6, 1)


def test_recent_window():
    window = recent_window(ANCHOR)
    assert window.start == date(2024, 5, 4)
    assert window.end == ANCHOR
    assert window.days == 28
    assert window.weeks_in_window == 4
    assert window.label == "Last 4 weeks"


def test_labels():
    assert four_week_label(1) == "[5-8 weeks ago]"
    assert four_week_label(2) == "[9-12 weeks ago]"
    assert four_week_label(12) == "[49-52 weeks ago]"
    assert year_label(1) == "[1-2 year(s) ago]"
    assert year_label(3) == "[3-4 year(s) ago]"


class TestHistoricalWindows:
    """Tests for the two-phase historical_windows() generator."""

    def test_no_records_means_no_windows(self):
        assert list(historical_windows(ANCHOR, None)) == []

    def test_only_recent_records_means_no_windows(self):
        assert list(historical_windows(ANCHOR, ANCHOR - timedelta(days=28))) == []
        assert list(historical_windows(ANCHOR, ANCHOR - timedelta(days=3))) == []

    def test_first_bucket_follows_recent_window(self):
        windows = list(historical_windows(ANCHOR, ANCHOR - timedelta(days=40)))
        assert len(windows) == 1
        assert windows[0].label == "[5-8 weeks ago]"
        assert windows[0].start == ANCHOR - timedelta(days=56)
        assert windows[0].end == ANCHOR - timedelta(days=28)
        assert windows[0].weeks_in_window == 4

    def test_stops_once_oldest_record_is_covered(self):
        # A record exactly on a bucket boundary belongs to the bucket starting there.
        windows = list(historical_windows(ANCHOR, ANCHOR - timedelta(days=84)))
        assert [window.label for window in windows] == [
            "[5-8 weeks ago]",
            "[9-12 weeks ago]",
        ]
        assert windows[-1].start == ANCHOR - timedelta(days=84)

    def test_twelve_four_week_buckets_then_years(self):
        oldest = ANCHOR - timedelta(days=1000)
        windows = list(historical_windows(ANCHOR, oldest))

        four_week = [window for window in windows if window.weeks_in_window == 4]
        yearly = [window for window in windows if window.weeks_in_window == 52]
        assert len(four_week) == 12
        assert four_week[-1].label == "[49-52 weeks ago]"
        assert four_week[-1].start == ANCHOR - timedelta(days=364)

        assert [window.label for window in yearly] == [
            "[1-2 year(s) ago]",
            "[2-3 year(s) ago]",
        ]
        assert yearly[0].end == ANCHOR - timedelta(days=364)
        assert yearly[0].days == 364
        assert yearly[-1].start <= oldest

    def test_year_phase_starts_immediately_after_horizon(self):
        # Oldest record just past the last four-week bucket.
        windows = list(historical_windows(ANCHOR, ANCHOR - timedelta(days=365)))
        assert windows[-1].label == "[1-2 year(s) ago]"
        assert len(windows) == 13

    def test_windows_are_contiguous_and_cover_history(self):
        oldest = date(2019, 2, 14)
        recent = recent_window(ANCHOR)
        windows = [recent, *historical_windows(ANCHOR, oldest)]

        for newer, older in zip(windows, windows[1:]):
            assert older.end == newer.start
        assert windows[0].end == ANCHOR
        assert windows[-1].start <= oldest < windows[-1].end

    def test_bucket_width_never_shrinks(self):
        windows = list(historical_windows(ANCHOR, date(2018, 1, 1)))
        widths = [window.days for window in windows]
        assert widths == sorted(widths)
        assert set(widths) == {28, 364}

    def test_labels_are_unique(self):
        windows = list(historical_windows(ANCHOR, date(2015, 7, 4)))
        labels = [window.label for window in windows]
        assert len(labels) == len(set(labels))

    def test_last_bucket_is_cut_short_at_earliest_date(self):
        oldest = date(1, 3, 1)
        windows = list(historical_windows(ANCHOR, oldest))

        assert windows[-1].start == date.min
        assert windows[-1].start <= oldest < windows[-1].end
        assert windows[-1].days < 364
        for newer, older in zip(windows, windows[1:]):
            assert older.end == newer.start

    def test_anchor_near_earliest_date(self):
        anchor = date(1, 1, 10)
        assert recent_window(anchor).start == date.min
        assert list(historical_windows(anchor, date.min)) == []

    def test_generator_is_lazy(self):
        windows = historical_windows(ANCHOR, date(1900, 1, 1))
        first = next(windows)
        assert first.label == "[5-8 weeks ago]"


class TestPlanBuckets:
    """Tests for plan_buckets() and partitioning records into windows."""

    def test_future_records_are_ignored_for_planning(self, workout_factory):
        records = [
            workout_factory.make({"date": "2024-06-10"}),
            workout_factory.make({"date": "2024-05-20"}),
        ]
        recent, windows = plan_buckets(records, ANCHOR)
        assert recent.end == ANCHOR
        assert list(windows) == []

    def test_plans_from_oldest_past_record(self, workout_factory):
        records = [
            workout_factory.make({"date": "2024-05-20"}),
            workout_factory.make({"date": "2024-03-01"}),
        ]
        _, windows = plan_buckets(records, ANCHOR)
        windows = list(windows)
        assert windows[-1].contains(date(2024, 3, 1))

    def test_no_records(self):
        recent, windows = plan_buckets([], ANCHOR)
        assert recent.label == "Last 4 weeks"
        assert list(windows) == []

    def test_boundaries_are_half_open(self, workout_factory):
        window = recent_window(ANCHOR)
        records = [
            workout_factory.make({"date": window.start.isoformat(), "type": "start"}),
            workout_factory.make({"date": window.end.isoformat(), "type": "end"}),
            workout_factory.make(
                {"date": (window.start - timedelta(days=1)).isoformat(), "type": "before"}
            ),
        ]
        assert [record.type for record in records_in_window(records, window)] == ["start"]

    def test_every_record_lands_in_exactly_one_bucket(self, workout_factory):
        records = [
            workout_factory.make_days_ago(days, reference=ANCHOR)
            for days in (1, 28, 29, 56, 100, 363, 364, 365, 700, 1000, 1500)
        ]
        recent, windows = plan_buckets(records, ANCHOR)
        windows = [recent, *windows]

        for record in records:
            matches = [window for window in windows if window.contains(record.date)]
            assert len(matches) == 1

        partitioned = list(partition_records(records, windows))
        assert sum(len(matching) for _, matching in partitioned) == len(records)

    def test_partition_omits_empty_windows(self, workout_factory):
        records = [
            workout_factory.make_days_ago(40, reference=ANCHOR),
            workout_factory.make_days_ago(800, reference=ANCHOR),
        ]
        _, windows = plan_buckets(records, ANCHOR)
        labels = [window.label for window, _ in partition_records(records, windows)]
        assert labels == ["[5-8 weeks ago]", "[2-3 year(s) ago]"]
