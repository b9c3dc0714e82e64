"""
Test data generators for jtree benchmarks.

Every generator draws from a fixed-seed random source, so repeated runs
measure identical documents:
- Records of different sizes (small/large)
- Mixed-type arrays and nested structures
- String-heavy content with escape sequences
"""

import json
import random
import string
from collections.abc import Callable
from typing import Any

SEED = 20240115
_ESCAPES = ['\\"', "\\\\", "\\/", "\\b", "\\f", "\\n", "\\r", "\\t"]
_ESCAPE_PROBABILITY = 0.3


def generate_test_data(data_type: str) -> str:
    """Generates JSON text for the named data shape."""
    generator = _GENERATORS.get(data_type)
    if generator is None:
        raise ValueError(f"Unknown data type: {data_type}")

    return generator(random.Random(SEED))


def generate_orders(count: int) -> str:
    """Generates a document of ``count`` orders for validation runs."""
    rng = random.Random(SEED)
    orders = [
        {
            "id": f"ord_{i:06d}",
            "status": rng.choice(["open", "paid", "shipped"]),
            "items": [
                {
                    "sku": _word(rng, 8).upper(),
                    "qty": rng.randint(1, 5),
                    "price": round(rng.uniform(0.5, 500.0), 2),
                }
                for _ in range(rng.randint(1, 6))
            ],
        }
        for i in range(count)
    ]
    return json.dumps({"orders": orders})


def _word(rng: random.Random, length: int) -> str:
    return "".join(rng.choices(string.ascii_letters, k=length))


def _timestamp(rng: random.Random) -> str:
    return (
        f"2024-{rng.randint(1, 12):02d}-{rng.randint(1, 28):02d}"
        f"T{rng.randint(0, 23):02d}:{rng.randint(0, 59):02d}:00Z"
    )


def _small_object(rng: random.Random) -> str:
    """A single user record well under 1KB."""
    return json.dumps(
        {
            "id": 12345,
            "name": "Alice Johnson",
            "email": "alice@example.com",
            "active": True,
            "balance": 1234.56,
            "metadata": {"created": _timestamp(rng), "source": "api"},
        }
    )


def _large_object(rng: random.Random) -> str:
    """A profile with transaction and activity history, over 10KB."""
    return json.dumps(
        {
            "user_id": rng.randint(1_000_000, 9_999_999),
            "profile": {
                "first_name": _word(rng, 10),
                "last_name": _word(rng, 12),
                "email": f"{_word(rng, 8)}@{_word(rng, 6)}.com",
                "address": {
                    "street": f"{rng.randint(1, 9999)} {_word(rng, 8)} St",
                    "city": _word(rng, 12),
                    "zip": f"{rng.randint(10000, 99999)}",
                },
                "notifications": {
                    "email": rng.choice([True, False]),
                    "push": rng.choice([True, False]),
                },
            },
            "transactions": [
                {
                    "id": f"txn_{i:06d}",
                    "amount": round(rng.uniform(1.0, 1000.0), 2),
                    "currency": rng.choice(["USD", "EUR", "GBP", "JPY"]),
                    "timestamp": _timestamp(rng),
                    "description": f"Payment for {_word(rng, 20)}",
                }
                for i in range(50)
            ],
            "activity_log": [
                {
                    "timestamp": _timestamp(rng),
                    "action": rng.choice(["login", "logout", "view"]),
                    "ip": ".".join(str(rng.randint(1, 255)) for _ in "1234"),
                }
                for _ in range(30)
            ],
        }
    )


def _mixed_array(rng: random.Random) -> str:
    """200 elements of every JSON kind, some of them small objects."""
    makers: list[Callable[[int], Any]] = [
        lambda _: rng.randint(-1000, 1000),
        lambda _: round(rng.uniform(-100.0, 100.0), 3),
        lambda _: _word(rng, rng.randint(5, 30)),
        lambda _: rng.choice([True, False]),
        lambda _: None,
        lambda i: {"index": i, "value": _word(rng, 10)},
    ]
    return json.dumps([rng.choice(makers)(i) for i in range(200)])


def _nested_structure(rng: random.Random) -> str:
    """A tree eight levels deep with three children per level."""

    def node(depth: int) -> dict[str, Any]:
        if depth == 0:
            return {"value": _word(rng, 10)}
        return {
            "level": depth,
            "items": [node(depth - 1) for _ in range(3)],
        }

    return json.dumps(node(8))


def _string_heavy(rng: random.Random) -> str:
    """Strings dense with escapes and unicode escapes."""

    def escaped() -> str:
        return "".join(
            rng.choice(_ESCAPES)
            if rng.random() < _ESCAPE_PROBABILITY
            else rng.choice(string.ascii_letters + " ")
            for _ in range(50)
        )

    strings = [escaped() for _ in range(100)]
    unicode = [f"\\u{rng.randint(0x00A0, 0x2FFF):04x}" for _ in range(50)]
    # Escapes are already JSON text, so the document is assembled by hand
    return (
        '{"strings": ['
        + ", ".join(f'"{s}"' for s in strings)
        + '], "unicode": ['
        + ", ".join(f'"{u}"' for u in unicode)
        + "]}"
    )


_GENERATORS: dict[str, Callable[[random.Random], str]] = {
    "small_object": _small_object,
    "large_object": _large_object,
    "mixed_array": _mixed_array,
    "nested_structure": _nested_structure,
    "string_heavy": _string_heavy,
}

DATA_TYPES = tuple(_GENERATORS)
