import dataclasses

import pytest

from cpamm import events
from cpamm.events import (
    EVENT_TYPES,
    EvtCloseConfig,
    EvtCreatePosition,
    EvtFundReward,
    EvtLockPosition,
    EvtSetPoolStatus,
    event_name,
)
from cpamm.pubkey import Pubkey

POOL = Pubkey(b"\x01" * 32)
OWNER = Pubkey(b"\x02" * 32)
POSITION = Pubkey(b"\x03" * 32)
MINT = Pubkey(b"\x04" * 32)


def test_event_name_of_instance():
    event = EvtCloseConfig(config=POOL, admin=OWNER)
    assert event_name(event) == "EvtCloseConfig"


def test_event_name_of_class():
    assert event_name(EvtSetPoolStatus) == "EvtSetPoolStatus"


def test_event_name_matches_class_name_for_all_events():
    for cls in EVENT_TYPES:
        assert event_name(cls) == cls.__name__
        assert getattr(events, cls.__name__) is cls


def test_event_name_rejects_non_event():
    with pytest.raises(TypeError):
        event_name(POOL)
    with pytest.raises(TypeError):
        event_name(int)


def test_events_are_frozen():
    event = EvtSetPoolStatus(pool=POOL, status=1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        event.status = 0
    assert event.status == 1
    assert event.pool == POOL


def test_event_equality_by_fields():
    first = EvtCreatePosition(
        pool=POOL, owner=OWNER, position=POSITION, position_nft_mint=MINT
    )
    same = EvtCreatePosition(
        pool=POOL, owner=OWNER, position=POSITION, position_nft_mint=MINT
    )
    other = dataclasses.replace(first, owner=POOL)
    assert first == same
    assert (first == other) is False


def test_fund_reward_field_order():
    event = EvtFundReward(POOL, OWNER, MINT, 1, 100, 99, 1000, 5, 6)
    data = dataclasses.asdict(event)
    assert list(data) == [
        "pool",
        "funder",
        "mint_reward",
        "reward_index",
        "amount",
        "transfer_fee_excluded_amount_in",
        "reward_duration_end",
        "pre_reward_rate",
        "post_reward_rate",
    ]
    assert event.funder == OWNER
    assert event.amount == 100
    assert event.post_reward_rate == 6