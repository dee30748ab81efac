# cpamm

Pure-Python building blocks for an automated market maker whose prices live
inside a bounded `[sqrt_min_price, sqrt_max_price]` range. Prices are square
roots in Q64.64 fixed point, and all arithmetic is exact integer math with
explicit rounding and overflow checks.

## Install

```
pip install .
pip install ".[test]"   # with the test dependencies
```

## Modules

- `cpamm.curve`: liquidity math.
  - `get_initialize_amounts(sqrt_min_price, sqrt_max_price, sqrt_price, liquidity)`
    returns the `(amount_a, amount_b)` needed to seed a pool, both rounded up.
  - `get_delta_amount_a_unsigned` and `get_delta_amount_b_unsigned` return
    token amounts for a liquidity over a price range; they raise
    `PoolException(PoolError.MATH_OVERFLOW)` when the result does not fit in
    64 bits. The `_unchecked` variants skip that bound.
  - `get_next_sqrt_price_from_input(sqrt_price, liquidity, amount_in, a_for_b)`
    and the two helpers `get_next_sqrt_price_from_amount_a_rounding_up` and
    `get_next_sqrt_price_from_amount_b_rounding_down`.
  - `Rounding` (`UP`, `DOWN`) picks the rounding direction, and
    `mul_div_u256(x, y, denominator, rounding)` is the multiply-then-divide
    behind them. It returns `None` on a zero divisor or a result wider than
    256 bits.
  - Arguments that are negative or wider than their integer type raise
    `ValueError`.
- `cpamm.errors`: `PoolError`, an enum of every error kind, each with a
  `message` and a numeric `code` counted from 6000. `PoolException` is raised
  with one of them, and `require(condition, error)` raises it when the
  condition is false.
- `cpamm.pubkey`: `Pubkey`, a frozen, ordered 32-byte key with `to_bytes()`,
  `is_default()` and a base58 `str()`. Also `b58encode`, `b58decode` and
  `parse_pubkey`. The last two raise `ValueError` on bad input.
- `cpamm.constants`: price bounds (`MIN_SQRT_PRICE`, `MAX_SQRT_PRICE`), fee
  limits, reward durations, activation and vesting buffers, account seed
  prefixes, `TREASURY`, `DEFAULT_QUOTE_MINTS` (SOL and USDC), `ADMINS` and
  `is_admin(admin)`.
- `cpamm.vesting`: `VestingParameters` with `get_cliff_point`,
  `get_total_lock_amount` and `validate(current_point, max_vesting_duration)`.
- `cpamm.split`: `SplitPositionParameters`, whose `validate()` requires every
  percentage to be at most 100 and at least one of them to be non-zero.
- `cpamm.keys`: `max_key` and `min_key`, which return the bytes of the
  greater or lesser of two `Pubkey`s.
- `cpamm.events`: frozen dataclasses for config, token-badge, claim-fee
  operator, position, lock, fee-claim, pool-status and reward events, listed
  in `EVENT_TYPES`. `event_name(event)` gives the name of an event instance
  or class and raises `TypeError` for anything else.
- `cpamm.pool_setup`: `DynamicConfigParameters` (its `validate()` rejects the
  default key as creator authority), `is_whitelisted_quote_token` and
  `validate_quote_token`.

## Example

```python
from cpamm.constants import MIN_SQRT_PRICE, MAX_SQRT_PRICE
from cpamm.curve import get_initialize_amounts
from cpamm.errors import PoolError, PoolException

sqrt_price = 1 << 64  # price 1.0 in Q64.64
amount_a, amount_b = get_initialize_amounts(
    MIN_SQRT_PRICE, MAX_SQRT_PRICE, sqrt_price, 1 << 64
)

try:
    get_initialize_amounts(MIN_SQRT_PRICE, MAX_SQRT_PRICE, MIN_SQRT_PRICE, 1 << 127)
except PoolException as exc:
    assert exc.error is PoolError.MATH_OVERFLOW
```

## What it does not do

This package computes amounts and checks parameters. It does not do the
following:

- keep pool, position or config state
- execute swaps or add and remove liquidity
- move tokens
- derive account addresses
- emit events anywhere

It has no command-line tool and no storage.

## Tests

```
pytest
```