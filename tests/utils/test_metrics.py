from share_recovery.utils import CompositeMetrics, InMemoryMetrics, Timer


def test_in_memory_metrics_and_timer() -> None:
    sink = InMemoryMetrics()
    sink.emit_counter("reconstructions_total", value=2, status="success")
    sink.emit_gauge("shares_available", value=5, source="a")
    with Timer(sink, "reconstruction_seconds", source="a") as timer:
        pass
    snapshot = sink.snapshot()
    assert snapshot["counters"]["reconstructions_total"][0].value == 2
    assert snapshot["gauges"]["shares_available"][0].labels == (("source", "a"),)
    assert snapshot["timers"]["reconstruction_seconds"][0].labels == (("source", "a"),)
    assert snapshot["timers"]["reconstruction_seconds"][0].value == timer.elapsed


def test_total_filters_by_labels() -> None:
    sink = InMemoryMetrics()
    sink.emit_counter("reconstructions_total", status="success")
    sink.emit_counter("reconstructions_total", status="failure")
    sink.emit_counter("reconstructions_total", status="success")
    assert sink.total("reconstructions_total") == 3
    assert sink.total("reconstructions_total", status="success") == 2
    assert sink.total("unknown") == 0


def test_composite_metrics_fanout() -> None:
    sink1 = InMemoryMetrics()
    sink2 = InMemoryMetrics()
    composite = CompositeMetrics([sink1, sink2])
    composite.emit_counter("reconstructions_total", value=2, status="failure")
    composite.emit_timer("reconstruction_seconds", 0.5)
    assert sink1.counters["reconstructions_total"][0].labels == (("status", "failure"),)
    assert sink2.counters["reconstructions_total"][0].value == 2
    assert sink2.timers["reconstruction_seconds"][0].value == 0.5
