from grpcmon import transform
from grpcmon.entry import Entry, StatusCode


def base_entry():
    return Entry(id="id-1", method="/svc/Method", target="localhost:50051")


def test_apply_passes_through_when_no_steps():
    out = transform.Chain().apply(base_entry())
    assert out is not None
    assert out.method == "/svc/Method"


def test_set_method_changes_method():
    out = transform.Chain().add(transform.set_method("/new/Method")).apply(base_entry())
    assert out.method == "/new/Method"


def test_drop_errors_drops_non_ok_status():
    c = transform.Chain().add(transform.drop_errors())
    e = Entry(id="id-1", method="/svc/Method", status=StatusCode.UNKNOWN)
    assert c.apply(e) is None


def test_drop_errors_keeps_ok_entry():
    c = transform.Chain().add(transform.drop_errors())
    assert c.apply(base_entry()) == base_entry()


def test_override_target_replaces_target():
    out = transform.Chain().add(transform.override_target("newhost:9090")).apply(base_entry())
    assert out.target == "newhost:9090"


def test_apply_all_filters_and_transforms():
    c = transform.Chain().add(transform.drop_errors()).add(transform.override_target("prod:443"))
    entries = [
        Entry(id="1", target="old"),
        Entry(id="2", status=StatusCode.INVALID_ARGUMENT, target="old"),
        Entry(id="3", target="old"),
    ]
    out = c.apply_all(entries)
    assert [e.id for e in out] == ["1", "3"]
    assert all(e.target == "prod:443" for e in out)


def test_chain_steps_applied_in_order():
    order = []
    chain = (
        transform.Chain()
        .add(lambda e: order.append("a") or e)
        .add(lambda e: order.append("b") or e)
        .add(lambda e: order.append("c") or e)
    )
    out = chain.apply(base_entry())
    assert out == base_entry()
    assert order == ["a", "b", "c"]


def test_redact_metadata_key_redacts_matching_key():
    e = Entry(method="/svc/Method", metadata={"Authorization": "Bearer token", "x-id": "123"})
    out = transform.redact_metadata_key("authorization")(e)
    assert out is not None
    assert out.metadata["Authorization"] == "REDACTED"
    assert out.metadata["x-id"] == "123"


def test_redact_metadata_key_no_metadata_returns_unchanged():
    out = transform.redact_metadata_key("authorization")(base_entry())
    assert out is not None
    assert out.metadata is None


def test_keep_methods_allows_listed_method():
    f = transform.keep_methods("/svc/Method", "/svc/Other")
    assert f(base_entry()) == base_entry()


def test_keep_methods_drops_unlisted_method():
    assert transform.keep_methods("/svc/Other")(base_entry()) is None


def test_normalise_method_trims_and_lowercases():
    out = transform.normalise_method()(Entry(method="//Svc/MyMethod"))
    assert out.method == "svc/mymethod"


def test_preset_chained_redact_and_keep():
    entries = [
        Entry(id="1", method="/svc/A", metadata={"token": "token"}),
        Entry(id="2", method="/svc/B", metadata={"token": "placeholder"}),
    ]
    c = (
        transform.Chain()
        .add(transform.keep_methods("/svc/A"))
        .add(transform.redact_metadata_key("token"))
    )
    out = c.apply_all(entries)
    assert len(out) == 1
    assert out[0].metadata["token"] == "REDACTED"