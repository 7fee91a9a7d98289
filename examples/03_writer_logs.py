from __future__ import annotations

import operator

from _infra import FakeMirror, banner, run

from drills import LazyCoroResultWriter, collect_settled_w, fold_settled_w, lift as L


def logged(mirror: FakeMirror, path: str) -> LazyCoroResultWriter[int, Exception, str]:
    return LazyCoroResultWriter.from_lazy_coro_result(
        L.call(mirror.fetch_size, path), str
    ).with_log(f"asked {mirror.name}")


async def main() -> None:
    banner("03_writer_logs: *_w combinators keep every input's log")

    mirrors = [FakeMirror("eu"), FakeMirror("us", healthy=False), FakeMirror("asia")]

    wr = await collect_settled_w([logged(m, "/pkg/a") for m in mirrors])
    print("sizes:", wr.result.unwrap())
    for entry in wr.log:
        print("  log:", entry)

    wr = await fold_settled_w([logged(m, "/pkg/b") for m in mirrors], operator.add)
    print("total:", wr.result.unwrap(), "log:", list(wr.log))


if __name__ == "__main__":
    run(main)
