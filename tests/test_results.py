"""
Tests for the FunctionCtx result sink.
"""

import threading

import polars as pl

from tsverdict.core.fastdtw import FastDtw
from tsverdict.core.outlier import Outlier
from tsverdict.core.results import AnalysisResult, FunctionCtx


class TestFunctionCtx:

    def test_append_order(self):
        ctx = FunctionCtx()
        fn = Outlier()
        ctx.add(fn, True, "a")
        ctx.add(fn, False, "b")
        ctx.add(fn, True, "a")

        assert [(r.value, r.join_key) for r in ctx] == [(True, "a"), (False, "b"), (True, "a")]
        assert ctx[1] == AnalysisResult(fn, False, "b")

    def test_no_deduplication(self):
        ctx = FunctionCtx()
        fn = Outlier()
        ctx.add(fn, False)
        ctx.add(fn, False)
        assert len(ctx) == 2

    def test_snapshot_is_immutable_copy(self):
        ctx = FunctionCtx()
        ctx.add(Outlier(), True)
        snapshot = ctx.results
        ctx.add(Outlier(), False)
        assert len(snapshot) == 1
        assert len(ctx.results) == 2

    def test_value_coerced_to_bool(self):
        ctx = FunctionCtx()
        result = ctx.add(Outlier(), 1)
        assert result.value is True

    def test_for_join_key(self):
        ctx = FunctionCtx()
        fn = Outlier()
        ctx.add(fn, True, "a")
        ctx.add(fn, False, "b")
        ctx.add(fn, False, "a")
        assert [r.value for r in ctx.for_join_key("a")] == [True, False]
        assert ctx.join_keys() == ["a", "b"]

    def test_concurrent_writers(self):
        ctx = FunctionCtx()
        fn = Outlier()

        def write(key):
            for _ in range(500):
                ctx.add(fn, True, key)

        threads = [threading.Thread(target=write, args=(k,)) for k in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(ctx) == 4000
        for k in range(8):
            assert len(ctx.for_join_key(k)) == 500

    def test_to_frame(self):
        ctx = FunctionCtx()
        ctx.add(Outlier(), True)
        ctx.add(FastDtw.from_arguments(["env=prod", "5", "0.4"]), False, "host=a")

        df = ctx.to_frame()
        assert df.columns == ['function', 'type', 'arguments', 'value', 'join_key']
        assert df['function'].to_list() == ['outlier', 'fastdtw']
        assert df['value'].to_list() == [True, False]
        assert df['join_key'].to_list() == [None, 'host=a']
        assert df['arguments'][1].startswith("search radius=5")

    def test_to_frame_empty(self):
        df = FunctionCtx().to_frame()
        assert df.height == 0
        assert df.schema['value'] == pl.Boolean
