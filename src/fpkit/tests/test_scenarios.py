"""End-to-end usage scenarios across containers and pipes."""

from __future__ import annotations

from fpkit import Err, Just, Nothing, Ok, from_tuple, maybe, pipe, result, state


def test_just_doubled_then_shown() -> None:
    show = pipe(maybe.map(lambda x: x * 2), maybe.match(lambda: "none", str))
    assert show(Just(5)) == "10"


def test_nothing_falls_to_default() -> None:
    show = pipe(maybe.map(lambda x: x * 2), maybe.match(lambda: "none", str))
    assert show(Nothing()) == "none"


def test_ok_uppercased_err_untouched() -> None:
    upper = result.map(str.upper)
    boom = ValueError("boom")

    assert upper(Ok("hello")) == Ok("HELLO")
    assert upper(Err(boom)).unwrap_err() is boom


def test_counter_get_then_modify() -> None:
    counter = state.get().flat_map(lambda _: state.modify(lambda s: s + 1))
    assert state.exec_state(0)(counter) == 1


def test_triple_double() -> None:
    double = lambda x: x * 2  # noqa: E731
    assert pipe(double, double, double)(1) == 8


def test_from_tuple_dual_returns() -> None:
    some_error = ConnectionError("refused")
    assert from_tuple("", some_error) == Err(some_error)
    assert from_tuple(None, some_error) == Err(some_error)
    assert from_tuple("ok", None) == Ok("ok")


def test_lookup_chain() -> None:
    """Nested optional lookups without None checks."""
    users = {"ada": {"email": "ada@example.org"}, "bob": {}}

    def email_domain(name: str) -> str:
        return pipe(
            lambda n: maybe.from_nullable(users.get(n)),
            maybe.bind(lambda u: maybe.from_nullable(u.get("email"))),
            maybe.map(lambda e: e.split("@")[1]),
            maybe.match(lambda: "unknown", lambda d: d),
        )(name)

    assert email_domain("ada") == "example.org"
    assert email_domain("bob") == "unknown"
    assert email_domain("eve") == "unknown"
