import threading

from hanscan.core.results import ResultAccumulator, ScanResult


def test_result_serialises_with_camel_case_path():
    result = ScanResult("src/a.ts", 1, 12, "你好")
    assert result.to_dict() == {"filePath": "src/a.ts", "line": 1, "column": 12, "text": "你好"}
    assert result.location == "src/a.ts:1:12"


def test_results_are_hashable_values():
    assert {ScanResult("a", 1, 1, "x"), ScanResult("a", 1, 1, "x")} == {ScanResult("a", 1, 1, "x")}


def test_concurrent_appends_are_not_lost():
    accumulator = ResultAccumulator()

    def worker(n):
        for i in range(500):
            accumulator.append(ScanResult(f"f{n}", i + 1, 1, "中"))

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    snapshot = accumulator.snapshot()
    assert len(snapshot) == 4000
    assert len(set(snapshot)) == 4000


def test_snapshot_is_a_copy():
    accumulator = ResultAccumulator()
    accumulator.append(ScanResult("a", 1, 1, "x"))
    snapshot = accumulator.snapshot()
    snapshot.clear()
    assert len(accumulator) == 1
