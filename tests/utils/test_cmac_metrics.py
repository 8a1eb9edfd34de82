from cmac.utils import InMemoryMetrics, Timer


def test_in_memory_metrics_and_timer() -> None:
    sink = InMemoryMetrics()
    sink.emit_counter("epochs", value=2, variant="discrete")
    sink.emit_gauge("accuracy", value=0.5, variant="discrete")
    with Timer(sink, "training_time_ms", variant="continuous") as timer:
        pass
    snapshot = sink.snapshot()
    assert snapshot["counters"]["epochs"][0].value == 2
    assert snapshot["gauges"]["accuracy"][0].labels == (("variant", "discrete"),)
    assert snapshot["timers"]["training_time_ms"][0].labels == (("variant", "continuous"),)
    assert timer.elapsed_ms is not None and timer.elapsed_ms >= 0.0
    assert sink.values("timers", "training_time_ms") == [timer.elapsed_ms]
    assert sink.values("gauges", "missing") == []
