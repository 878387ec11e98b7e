"""Integration tests for the CartSession application service.

Uses the in-memory fake document store and identity provider.
"""

from __future__ import annotations

from decimal import Decimal

from medistore.application.cart_mirror import CARTS_COLLECTION, CartMirror
from medistore.application.cart_session import NOT_SIGNED_IN, CartSession
from medistore.domain.model.product import Product
from medistore.domain.model.user import User
from medistore.domain.model.value_objects import Money
from tests.fakes import FakeDocumentStore, FakeIdentityProvider

ALICE = User(uid="alice", email="alice@example.com")
BOB = User(uid="bob")

PARACETAMOL = Product(
    id="m1", name="Paracetamol", price=Money.of("49.99"), image="https://img/m1.jpg"
)
VITAMIN_D = Product(id="m3", name="Vitamin D3", price=Money.of("10"), image="")
SHAMPOO = Product(id="m6", name="Baby Shampoo", price=Money.of("5"), image="")


def _setup(
    user: User | None = ALICE,
) -> tuple[CartSession, FakeDocumentStore, FakeIdentityProvider]:
    """Build and start a session with a fake store, optionally signed in."""
    store = FakeDocumentStore()
    identity = FakeIdentityProvider(user)
    session = CartSession(CartMirror(store), identity)
    session.start()
    return session, store, identity


def _stored_items(store: FakeDocumentStore, uid: str) -> list[dict]:
    return store.collections[CARTS_COLLECTION][uid]["items"]


class TestReconciliation:

    def test_syncing_until_started(self):
        store = FakeDocumentStore()
        session = CartSession(CartMirror(store), FakeIdentityProvider(ALICE))
        assert session.is_syncing
        session.start()
        assert not session.is_syncing

    def test_anonymous_session_is_empty_and_never_reads(self):
        seen = []
        store = FakeDocumentStore()
        store.before_get = lambda collection, doc_id: seen.append(doc_id)
        session = CartSession(CartMirror(store), FakeIdentityProvider(None))
        session.start()
        assert session.current() == ()
        assert not session.is_syncing
        assert seen == []
        assert store.writes == 0

    def test_first_session_creates_empty_document(self):
        session, store, _ = _setup()
        doc = store.collections[CARTS_COLLECTION]["alice"]
        assert doc["items"] == []
        assert doc["updatedAt"]
        assert session.current() == ()

    def test_existing_document_is_loaded(self):
        store = FakeDocumentStore()
        store.set(CARTS_COLLECTION, "alice", {
            "items": [{"id": "m1", "name": "Paracetamol", "price": 49.99,
                       "image": "x.jpg", "quantity": 3}],
        })
        session = CartSession(CartMirror(store), FakeIdentityProvider(ALICE))
        session.start()

        [item] = session.current()
        assert item.id == "m1"
        assert item.quantity.value == 3
        assert item.price.amount == Decimal("49.99")

    def test_document_without_items_loads_empty(self):
        store = FakeDocumentStore()
        store.set(CARTS_COLLECTION, "alice", {"updatedAt": "yesterday"})
        session = CartSession(CartMirror(store), FakeIdentityProvider(ALICE))
        session.start()
        assert session.current() == ()

    def test_malformed_items_load_empty(self):
        store = FakeDocumentStore()
        store.set(CARTS_COLLECTION, "alice", {"items": [{"id": "m1", "quantity": 0}]})
        session = CartSession(CartMirror(store), FakeIdentityProvider(ALICE))
        session.start()
        assert session.current() == ()

    def test_load_failure_is_swallowed_and_cart_looks_empty(self):
        store = FakeDocumentStore()
        store.fail_reads = True
        session = CartSession(CartMirror(store), FakeIdentityProvider(ALICE))
        session.start()  # must not raise
        assert session.current() == ()
        assert not session.is_syncing

    def test_reload_failure_for_same_user_keeps_prior_cart(self):
        session, store, _ = _setup()
        session.add_item(PARACETAMOL)
        store.fail_reads = True

        session.reconcile(ALICE)

        assert [item.id for item in session.current()] == ["m1"]

    def test_logout_clears_cart(self):
        session, _, identity = _setup()
        session.add_item(PARACETAMOL)
        identity.switch(None)
        assert session.current() == ()
        assert session.user is None

    def test_switching_user_never_shows_previous_items(self):
        session, store, identity = _setup()
        session.add_item(PARACETAMOL)
        session.add_item(VITAMIN_D)

        seen_during_load = []
        store.before_get = lambda collection, doc_id: seen_during_load.append(session.current())
        identity.switch(BOB)

        assert seen_during_load == [()]
        assert session.current() == ()
        assert session.user == BOB

    def test_switching_back_reloads_first_users_cart(self):
        session, _, identity = _setup()
        session.add_item(PARACETAMOL)
        identity.switch(BOB)
        identity.switch(ALICE)
        assert [item.id for item in session.current()] == ["m1"]

    def test_closed_session_ignores_identity_changes(self):
        session, _, identity = _setup()
        session.add_item(PARACETAMOL)
        session.close()
        identity.switch(BOB)
        assert session.user == ALICE


class TestAddItem:

    def test_adds_and_persists_whole_cart(self):
        session, store, _ = _setup()
        result = session.add_item(PARACETAMOL)

        assert result.ok
        assert _stored_items(store, "alice") == [
            {"id": "m1", "name": "Paracetamol", "price": 49.99,
             "image": "https://img/m1.jpg", "quantity": 1},
        ]

    def test_adding_twice_merges(self):
        session, store, _ = _setup()
        session.add_item(PARACETAMOL)
        session.add_item(PARACETAMOL)

        assert len(session.current()) == 1
        assert session.current()[0].quantity.value == 2
        assert _stored_items(store, "alice")[0]["quantity"] == 2

    def test_every_write_refreshes_timestamp(self):
        session, store, _ = _setup()
        session.add_item(PARACETAMOL)
        first = store.collections[CARTS_COLLECTION]["alice"]["updatedAt"]
        session.add_item(PARACETAMOL)
        assert store.collections[CARTS_COLLECTION]["alice"]["updatedAt"] > first

    def test_write_failure_leaves_cart_unchanged(self):
        session, store, _ = _setup()
        session.add_item(PARACETAMOL)
        store.fail_writes = True

        result = session.add_item(VITAMIN_D)

        assert not result.ok
        assert result.reason == "store unreachable"
        assert [item.id for item in session.current()] == ["m1"]

    def test_anonymous_add_is_noop(self):
        session, store, _ = _setup(user=None)
        result = session.add_item(PARACETAMOL)
        assert not result.ok
        assert result.reason == NOT_SIGNED_IN
        assert session.current() == ()
        assert store.writes == 0


class TestUpdateQuantity:

    def test_sets_exact_quantity(self):
        session, store, _ = _setup()
        session.add_item(PARACETAMOL)
        session.add_item(PARACETAMOL)

        assert session.update_quantity("m1", 5).ok
        assert session.current()[0].quantity.value == 5
        assert _stored_items(store, "alice")[0]["quantity"] == 5

    def test_zero_removes_item(self):
        session, store, _ = _setup()
        session.add_item(PARACETAMOL)
        session.add_item(VITAMIN_D)

        session.update_quantity("m1", 0)

        assert [item.id for item in session.current()] == ["m3"]
        assert [i["id"] for i in _stored_items(store, "alice")] == ["m3"]

    def test_negative_removes_item(self):
        session, _, _ = _setup()
        session.add_item(PARACETAMOL)
        session.update_quantity("m1", -1)
        assert session.current() == ()

    def test_removing_absent_item_leaves_collection_unchanged(self):
        session, _, _ = _setup()
        session.add_item(PARACETAMOL)
        before = session.current()

        assert session.update_quantity("nope", 0).ok
        assert session.current() == before

    def test_remove_item_is_quantity_zero(self):
        session, _, _ = _setup()
        session.add_item(PARACETAMOL)
        session.remove_item("m1")
        assert session.current() == ()

    def test_write_failure_leaves_cart_unchanged(self):
        session, store, _ = _setup()
        session.add_item(PARACETAMOL)
        store.fail_writes = True

        assert not session.update_quantity("m1", 9).ok
        assert session.current()[0].quantity.value == 1

    def test_anonymous_update_is_noop(self):
        session, store, _ = _setup(user=None)
        assert not session.update_quantity("m1", 3).ok
        assert store.writes == 0


class TestClear:

    def test_clear_is_local_only_by_default(self):
        session, store, _ = _setup()
        session.add_item(PARACETAMOL)
        writes = store.writes

        assert session.clear().ok
        assert session.current() == ()
        assert store.writes == writes
        assert len(_stored_items(store, "alice")) == 1

    def test_cleared_items_return_on_reload(self):
        session, _, _ = _setup()
        session.add_item(PARACETAMOL)
        session.clear()
        session.reconcile(ALICE)
        assert [item.id for item in session.current()] == ["m1"]

    def test_persisted_clear_empties_mirror(self):
        session, store, _ = _setup()
        session.add_item(PARACETAMOL)
        assert session.clear(persist=True).ok
        assert _stored_items(store, "alice") == []

    def test_persisted_clear_failure_does_not_restore_items(self):
        session, store, _ = _setup()
        session.add_item(PARACETAMOL)
        store.fail_writes = True

        result = session.clear(persist=True)

        assert not result.ok
        assert session.current() == ()


class TestTotal:

    def test_total_of_current_collection(self):
        session, _, _ = _setup()
        session.add_item(VITAMIN_D)
        session.add_item(VITAMIN_D)
        session.add_item(SHAMPOO)
        session.update_quantity("m6", 3)
        assert session.total() == Money.of("35")

    def test_empty_total_is_zero(self):
        session, _, _ = _setup()
        assert session.total() == Money.of("0")


class TestEndToEnd:

    def test_add_merge_set_remove(self):
        session, _, _ = _setup()
        assert session.current() == ()

        session.add_item(PARACETAMOL)
        assert len(session.current()) == 1
        assert session.current()[0].quantity.value == 1

        session.add_item(PARACETAMOL)
        assert len(session.current()) == 1
        assert session.current()[0].quantity.value == 2

        session.update_quantity("m1", 5)
        assert session.current()[0].quantity.value == 5
        assert session.total() == Money.of("249.95")

        session.update_quantity("m1", 0)
        assert session.current() == ()
        assert session.total() == Money.of("0")
