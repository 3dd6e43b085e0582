from datetime import datetime, timezone

import pytest

from portfolio.auth import (
    ANONYMOUS,
    AUTHENTICATED,
    CACHE_SESSION_KEY,
    CACHE_USER_KEY,
    MemoryStore,
    SessionController,
)
from portfolio.gateway import (
    SIGNED_IN,
    SIGNED_OUT,
    AuthGateway,
    GatewayUnavailable,
    Identity,
    Session,
    Subscription,
)

OWNER = Identity(id="user-1", email="owner@example.com")
OTHER = Identity(id="user-2", email="other@example.com")


def make_session(user=OWNER, token="token-1"):
    return Session(
        access_token=token,
        user=user,
        expires_at=datetime(2030, 1, 1, tzinfo=timezone.utc),
    )


class FakeAuth(AuthGateway):
    """Auth service double; ``None`` for ``user_for_token`` means unknown token."""

    def __init__(self, session=None, *, reachable=True, user_for_token=OWNER, sign_out_error=None):
        self.session = session
        self.reachable = reachable
        self.user_for_token = user_for_token
        self.sign_out_error = sign_out_error
        self.listeners = []
        self.calls = []

    def _check(self, name):
        self.calls.append(name)
        if not self.reachable:
            raise GatewayUnavailable("connection refused")

    def sign_in(self, email, password):
        raise NotImplementedError

    def sign_up(self, email, password):
        raise NotImplementedError

    def sign_out(self):
        self.calls.append("sign_out")
        if self.sign_out_error:
            raise self.sign_out_error
        self.emit(SIGNED_OUT, None)

    def get_session(self):
        self._check("get_session")
        return self.session

    def get_user(self, access_token):
        self._check("get_user")
        return self.user_for_token

    def on_auth_change(self, callback):
        self.calls.append("on_auth_change")
        self.listeners.append(callback)
        return Subscription(self.listeners, callback)

    def emit(self, event, session):
        for callback in list(self.listeners):
            callback(event, session)


class Recorder:
    def __init__(self, path="/dashboard"):
        self.path = path
        self.navigations = []
        self.notifications = []

    def navigate(self, path):
        self.navigations.append(path)

    def notify(self, title, description):
        self.notifications.append(title)


def cached_store(session=None):
    session = session or make_session()
    return MemoryStore({
        CACHE_USER_KEY: session.user.to_dict(),
        CACHE_SESSION_KEY: session.to_dict(),
    })


def build(auth, store=None, recorder=None):
    recorder = recorder or Recorder()
    controller = SessionController(
        auth,
        store if store is not None else MemoryStore(),
        navigate=recorder.navigate,
        current_path=lambda: recorder.path,
        notify=recorder.notify,
    )
    return controller, recorder


# -------------------------------------------------
# initialize
# -------------------------------------------------
def test_active_session_is_adopted_and_cached():
    store = MemoryStore()
    controller, recorder = build(FakeAuth(make_session()), store)

    state = controller.initialize()

    assert state.status == AUTHENTICATED
    assert state.user == OWNER
    assert store.get(CACHE_USER_KEY) == OWNER.to_dict()
    assert store.get(CACHE_SESSION_KEY)["access_token"] == "token-1"
    assert recorder.navigations == []


def test_subscribes_before_querying_the_gateway():
    auth = FakeAuth(make_session())
    controller, _ = build(auth)

    controller.initialize()

    assert auth.listeners == [controller.on_auth_event]
    assert auth.calls[:2] == ["on_auth_change", "get_session"]


def test_valid_cache_with_unreachable_gateway_stays_authenticated():
    auth = FakeAuth(reachable=False)
    controller, recorder = build(auth, cached_store())

    state = controller.initialize()

    assert state.status == AUTHENTICATED
    assert state.user == OWNER
    assert recorder.navigations == []
    assert recorder.notifications == ["Authentication error"]


def test_empty_cache_with_unreachable_gateway_redirects_to_sign_in():
    controller, recorder = build(FakeAuth(reachable=False))

    state = controller.initialize()

    assert state.status == ANONYMOUS
    assert recorder.navigations == ["/auth"]


def test_cache_rejected_by_gateway_is_cleared():
    store = cached_store()
    controller, recorder = build(FakeAuth(user_for_token=None), store)

    state = controller.initialize()

    assert state.status == ANONYMOUS
    assert store.get(CACHE_USER_KEY) is None
    assert store.get(CACHE_SESSION_KEY) is None
    assert recorder.navigations == ["/auth"]


def test_cache_revalidation_picks_up_changed_identity():
    updated = Identity(id=OWNER.id, email="renamed@example.com")
    store = cached_store()
    controller, _ = build(FakeAuth(user_for_token=updated), store)

    state = controller.initialize()

    assert state.user == updated
    assert store.get(CACHE_USER_KEY)["email"] == "renamed@example.com"


def test_no_redirect_when_already_on_sign_in_page():
    controller, recorder = build(FakeAuth(), recorder=Recorder(path="/auth"))

    state = controller.initialize()

    assert state.status == ANONYMOUS
    assert recorder.navigations == []


def test_mismatched_cache_entries_are_ignored():
    store = MemoryStore({
        CACHE_USER_KEY: OTHER.to_dict(),
        CACHE_SESSION_KEY: make_session().to_dict(),
    })
    controller, recorder = build(FakeAuth(), store)

    assert controller.initialize().status == ANONYMOUS
    assert recorder.navigations == ["/auth"]


# -------------------------------------------------
# Events
# -------------------------------------------------
def test_signed_out_event_clears_state_and_cache():
    auth = FakeAuth(make_session())
    store = MemoryStore()
    controller, recorder = build(auth, store)
    controller.initialize()

    auth.emit(SIGNED_OUT, None)

    assert controller.state.status == ANONYMOUS
    assert store.get(CACHE_SESSION_KEY) is None
    assert recorder.navigations == ["/auth"]


def test_event_with_session_replaces_state():
    auth = FakeAuth(make_session())
    store = MemoryStore()
    controller, _ = build(auth, store)
    controller.initialize()

    auth.emit(SIGNED_IN, make_session(OTHER, token="token-2"))

    assert controller.state.user == OTHER
    assert store.get(CACHE_SESSION_KEY)["access_token"] == "token-2"


# -------------------------------------------------
# refresh / sign_out / dispose
# -------------------------------------------------
def test_refresh_failure_leaves_state_untouched():
    auth = FakeAuth(make_session())
    controller, _ = build(auth)
    controller.initialize()
    before = controller.state

    auth.reachable = False
    assert controller.refresh() is False
    assert controller.state == before

    auth.reachable = True
    auth.session = None
    assert controller.refresh() is False
    assert controller.state == before


def test_refresh_adopts_new_session():
    auth = FakeAuth(make_session())
    controller, _ = build(auth)
    controller.initialize()

    auth.session = make_session(token="token-3")

    assert controller.refresh() is True
    assert controller.state.session.access_token == "token-3"


def test_sign_out_clears_local_state_even_when_remote_call_fails():
    auth = FakeAuth(make_session(), sign_out_error=GatewayUnavailable("timeout"))
    store = MemoryStore()
    controller, recorder = build(auth, store)
    controller.initialize()

    controller.sign_out()

    assert controller.state.status == ANONYMOUS
    assert store.get(CACHE_USER_KEY) is None
    assert store.get(CACHE_SESSION_KEY) is None
    assert recorder.navigations[-1] == "/auth"
    assert "Signed out successfully" in recorder.notifications


def test_dispose_unsubscribes_and_is_idempotent():
    auth = FakeAuth(make_session())

    with build(auth)[0] as controller:
        controller.initialize()
        assert len(auth.listeners) == 1

    assert auth.listeners == []
    controller.dispose()
    assert auth.listeners == []


@pytest.mark.parametrize("payload", [{"access_token": "x"}, {"user": {}}, "garbage"])
def test_unreadable_cache_counts_as_empty(payload):
    store = MemoryStore({CACHE_USER_KEY: OWNER.to_dict(), CACHE_SESSION_KEY: payload})
    controller, recorder = build(FakeAuth(), store)

    assert controller.initialize().status == ANONYMOUS
    assert recorder.navigations == ["/auth"]
