# tools/profile_search.py
"""
Small profiling harness for Trie.find_all.
Usage:
  python tools/profile_search.py --keys 5000 --iters 1000 --query an

Builds a synthetic index, then prints mean/median/p90/max latency.
"""
import argparse
import random
import statistics
import string
import time

from multitrie.core.trie import Trie, TrieSettings

HANGUL_SAMPLE = ["한글", "검색", "자동완성", "사전", "태그", "초성", "문자열", "색인"]


def build(n_keys: int, seed: int = 7, partial: bool = True) -> Trie:
    rnd = random.Random(seed)
    trie = Trie(TrieSettings(use_partial_search=partial))
    for i in range(n_keys):
        word = "".join(rnd.choice(string.ascii_lowercase) for _ in range(rnd.randint(3, 10)))
        trie.insert_key(word, i)
    for i, word in enumerate(HANGUL_SAMPLE):
        trie.insert_key(word, f"ko-{i}")
    return trie


def benchmark(trie: Trie, queries, iterations=200):
    times = []
    for i in range(iterations):
        q = queries[i % len(queries)]
        t0 = time.perf_counter()
        _ = trie.find_all(q)
        t1 = time.perf_counter()
        times.append((t1 - t0) * 1000.0)  # ms
    return times


def summarize(times):
    times_sorted = sorted(times)
    return {
        "count": len(times_sorted),
        "mean_ms": statistics.mean(times_sorted),
        "median_ms": statistics.median(times_sorted),
        "p90_ms": times_sorted[max(0, int(0.9 * len(times_sorted)) - 1)],
        "max_ms": max(times_sorted),
    }


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--keys", type=int, default=5000, help="synthetic keys to insert")
    parser.add_argument("--iters", type=int, default=500, help="measured iterations")
    parser.add_argument("--warm", type=int, default=50, help="warmup iterations")
    parser.add_argument("--query", action="append", default=None, help="query (repeatable)")
    parser.add_argument("--prefix-only", action="store_true", help="disable partial search")
    args = parser.parse_args()

    t0 = time.perf_counter()
    trie = build(args.keys, partial=not args.prefix_only)
    print(f"Built {args.keys} keys, {trie.total_count} nodes in {time.perf_counter() - t0:.3f}s")

    queries = args.query or ["an", "q", "xyz", "abc", "ㅎㄱ", "검"]
    benchmark(trie, queries, iterations=args.warm)
    s = summarize(benchmark(trie, queries, iterations=args.iters))
    print("Stats (ms): mean=%.4f median=%.4f p90=%.4f max=%.4f" % (
        s["mean_ms"], s["median_ms"], s["p90_ms"], s["max_ms"],
    ))
    print("Sample:", queries[0], "->", trie.find_all(queries[0])[:10])


if __name__ == "__main__":
    main()
