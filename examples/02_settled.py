from __future__ import annotations

import operator

from _infra import FakeMirror, banner, run

from drills import collect_settled, fold_settled, lift as L, propose, race_first
from kungfu import Error, Ok


async def main() -> None:
    banner("02_settled: propose + collect_settled + race_first + fold_settled")

    for answer in (True, False, None):
        match await propose(answer):
            case Ok(message):
                print(message)
            case Error(err):
                print(f"error: {err}")

    mirrors = [
        FakeMirror("eu", delay_seconds=0.03),
        FakeMirror("us", delay_seconds=0.01, healthy=False),
        FakeMirror("asia", delay_seconds=0.02),
    ]

    def sizes():
        return [L.call(m.fetch_size, "/pkg/drills.tar.gz") for m in mirrors]

    print("sizes:", (await collect_settled(sizes())).unwrap())
    print("fastest:", await race_first(sizes()))
    print("total:", (await fold_settled(sizes(), operator.add)).unwrap())


if __name__ == "__main__":
    run(main)
