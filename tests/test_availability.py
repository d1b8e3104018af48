"""
Tests for free/busy helpers.

Bounds are minutes since midnight: 540 = 09:00, 1260 = 21:00.
"""

import pytest

from block_algebra import Block, BlockSet, busy_blocks, free_blocks, is_free

WORK_DAY = Block(540, 1260)


@pytest.fixture
def meetings():
    return [
        Block(600, 660),  # 10:00-11:00
        Block(630, 690),  # 10:30-11:30 (double-booked)
        Block(900, 960),  # 15:00-16:00
        Block(1200, 1320),  # 20:00-22:00 (runs past the day)
    ]


class TestBusyBlocks:
    def test_merges_overlaps(self, meetings):
        assert busy_blocks(meetings, pad_before=0, pad_after=0) == BlockSet(
            [Block(600, 690), Block(900, 960), Block(1200, 1320)]
        )

    def test_clamped_to_window(self, meetings):
        assert busy_blocks(meetings, window=WORK_DAY, pad_before=0, pad_after=0) == BlockSet(
            [Block(600, 690), Block(900, 960), Block(1200, 1260)]
        )

    def test_busy_outside_window_dropped(self):
        assert busy_blocks([Block(0, 60)], window=WORK_DAY, pad_before=0, pad_after=0) == BlockSet.empty()

    def test_padding(self):
        assert busy_blocks([Block(600, 660)], pad_before=10, pad_after=5) == BlockSet([Block(590, 665)])

    def test_padding_joins_near_blocks(self):
        busy = [Block(600, 660), Block(670, 700)]
        assert busy_blocks(busy, pad_before=0, pad_after=10) == BlockSet([Block(600, 710)])


class TestFreeBlocks:
    def test_no_busy_time(self):
        assert free_blocks(WORK_DAY, [], min_length=0, pad_before=0, pad_after=0) == BlockSet([WORK_DAY])

    def test_gaps_between_meetings(self, meetings):
        free = free_blocks(WORK_DAY, meetings, min_length=0, pad_before=0, pad_after=0)
        assert free == BlockSet([Block(540, 600), Block(690, 900), Block(960, 1200)])

    def test_fully_booked(self):
        assert free_blocks(WORK_DAY, [Block(0, 1440)], min_length=0, pad_before=0, pad_after=0) == BlockSet.empty()

    def test_min_length_drops_short_gaps(self, meetings):
        free = free_blocks(WORK_DAY, meetings, min_length=61, pad_before=0, pad_after=0)
        assert free == BlockSet([Block(690, 900), Block(960, 1200)])

    def test_buffers_shrink_gaps(self):
        free = free_blocks(WORK_DAY, [Block(600, 660)], min_length=0, pad_before=10, pad_after=10)
        assert free == BlockSet([Block(540, 590), Block(670, 1260)])

    def test_touching_busy_blocks_leave_nothing(self):
        free = free_blocks(WORK_DAY, [Block(540, 600), Block(600, 1260)], min_length=0, pad_before=0, pad_after=0)
        assert free == BlockSet.empty()

    def test_point_window_has_no_free_time(self):
        assert free_blocks(Block(600, 600), [], min_length=0, pad_before=0, pad_after=0) == BlockSet.empty()

    def test_point_busy_block_splits_free_time(self):
        free = free_blocks(Block(0, 10), [Block(5, 5)], min_length=0, pad_before=0, pad_after=0)
        assert free == BlockSet([Block(0, 5), Block(5, 10)])

    def test_defaults_come_from_config(self, monkeypatch):
        from block_algebra import config

        monkeypatch.setattr(config, "PAD_BEFORE", 5)
        monkeypatch.setattr(config, "PAD_AFTER", 5)
        monkeypatch.setattr(config, "MIN_FREE_LENGTH", 0)
        assert free_blocks(Block(0, 100), [Block(40, 60)]) == BlockSet([Block(0, 35), Block(65, 100)])


class TestIsFree:
    def test_fits_in_gap(self, meetings):
        assert is_free(WORK_DAY, meetings, Block(700, 800), min_length=0, pad_before=0, pad_after=0)

    def test_back_to_back_is_free(self, meetings):
        assert is_free(WORK_DAY, meetings, Block(690, 720), min_length=0, pad_before=0, pad_after=0)

    def test_conflict(self, meetings):
        assert not is_free(WORK_DAY, meetings, Block(650, 700), min_length=0, pad_before=0, pad_after=0)

    def test_outside_window(self, meetings):
        assert not is_free(WORK_DAY, meetings, Block(500, 530), min_length=0, pad_before=0, pad_after=0)


class TestDatetimeBounds:
    def test_free_time_with_datetimes(self):
        from datetime import datetime, timedelta

        nine = datetime(2026, 3, 2, 9, 0)
        day = Block(nine, nine + timedelta(hours=8))
        standup = Block(nine, nine + timedelta(minutes=15))
        lunch = Block(nine + timedelta(hours=3), nine + timedelta(hours=4))

        free = free_blocks(day, [lunch, standup], min_length=timedelta(hours=1), pad_before=0, pad_after=0)
        assert free == BlockSet(
            [
                Block(nine + timedelta(minutes=15), nine + timedelta(hours=3)),
                Block(nine + timedelta(hours=4), nine + timedelta(hours=8)),
            ]
        )

    def test_timedelta_padding(self):
        from datetime import datetime, timedelta

        nine = datetime(2026, 3, 2, 9, 0)
        meeting = Block(nine + timedelta(hours=1), nine + timedelta(hours=2))
        busy = busy_blocks([meeting], pad_before=timedelta(minutes=10), pad_after=0)
        assert busy == BlockSet([Block(nine + timedelta(minutes=50), nine + timedelta(hours=2))])
