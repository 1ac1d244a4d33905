"""Testes de IgnorePolicy e ResultStore."""

from umbra_enum.enumeration.results import (
    FAILED_OUTCOME,
    IgnorePolicy,
    Outcome,
    ResultStore,
)


def test_add_many_deduplicates_in_insertion_order() -> None:
    ignore = IgnorePolicy()
    ignore.add_many([404, 301, 200, 301])

    assert ignore.codes == (404, 301, 200)


def test_seed_default_is_idempotent() -> None:
    """seed_default() duas vezes mantém um único 404."""
    ignore = IgnorePolicy()
    ignore.seed_default()
    ignore.seed_default()

    assert ignore.codes == (404,)
    assert 404 in ignore
    assert ignore.contains(404)
    assert not ignore.contains(200)


def test_seed_default_after_custom_codes() -> None:
    ignore = IgnorePolicy([403, 404])
    ignore.seed_default()

    assert ignore.codes == (403, 404)


def test_accept_filters_ignored_statuses() -> None:
    """Nenhum status ignorado aparece na visão ordenada."""
    ignore = IgnorePolicy([404, 500])
    store = ResultStore(ignore)

    outcomes = [
        Outcome("admin", 200),
        Outcome("missing", 404),
        Outcome("broken", 500),
        Outcome("private", 403),
    ]
    accepted = [store.accept(outcome) for outcome in outcomes]

    assert accepted == [True, False, False, True]
    assert all(status not in ignore for _, status in store.sorted_view())
    assert store.sorted_view() == [("admin", 200), ("private", 403)]


def test_sorted_view_is_stable_by_status() -> None:
    """Empates de status ficam em ordem alfabética."""
    store = ResultStore()
    for outcome in [Outcome("b", 200), Outcome("c", 301), Outcome("a", 200)]:
        store.accept(outcome)

    assert store.sorted_view() == [("a", 200), ("b", 200), ("c", 301)]
    assert store.items() == [("a", 200), ("b", 200), ("c", 301)]


def test_duplicate_path_last_write_wins() -> None:
    store = ResultStore()
    store.accept(Outcome("admin", 403))
    store.accept(Outcome("admin", 200))

    assert len(store) == 1
    assert store.get("admin") == 200


def test_default_store_drops_failed_sentinel() -> None:
    """O sentinela ("failed", 404) some com a política padrão."""
    store = ResultStore()

    assert store.accept(FAILED_OUTCOME) is False
    assert "failed" not in store


def test_failed_sentinel_appears_without_404() -> None:
    """Sem 404 na lista, a falha de transporte vira uma entrada "failed"."""
    store = ResultStore(IgnorePolicy())

    assert store.accept(FAILED_OUTCOME) is True
    assert store.sorted_view() == [("failed", 404)]


def test_outcome_unpacks_like_a_tuple() -> None:
    path, status = Outcome("admin", 200)

    assert (path, status) == ("admin", 200)
