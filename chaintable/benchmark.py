"""
Timing runner for HashTable operations.

Each operation is run on randomly generated string keys at exponentially
growing input sizes. Results are written to a CSV file, one row per
(input size, operation), and echoed to stdout as they are produced.

Example:
    from chaintable.benchmark import run_benchmarks
    run_benchmarks("hash_table_performance.csv", base_input=100, rounds=6)
"""

import csv
import random
import statistics
import string
import time

from .datastructures.hash_table import HashTable

CSV_HEADER = [
    "Input Size",
    "Operation",
    "Average Time (ms)",
    "Standard Deviation (ms)",
    "Final Capacity",
]


# ----------------------------
# Helper Functions
# ----------------------------

def generate_random_pairs(size: int, rng: random.Random):
    """Generate a list of random (key, value) pairs; keys are short ASCII words."""
    return [
        ("".join(rng.choices(string.ascii_letters, k=rng.randint(3, 10))), rng.randint(0, 1000000))
        for _ in range(size)
    ]


def _filled(data) -> HashTable:
    table = HashTable()
    for k, v in data:
        table.put(k, v)
    return table


def measure_operation_time(operation, input_size: int, iterations: int, rng: random.Random):
    """Run the operation several times; return (avg ms, std ms, final capacity)."""
    times = []
    capacity = 0
    for _ in range(iterations):
        data = generate_random_pairs(input_size, rng)
        start = time.perf_counter()
        table = operation(data)
        end = time.perf_counter()
        times.append((end - start) * 1000)
        capacity = table.capacity
        table.destroy()

    avg_time = statistics.mean(times)
    std_dev = statistics.stdev(times) if len(times) > 1 else 0.0
    return avg_time, std_dev, capacity


# ----------------------------
# Operations to Benchmark
# ----------------------------

def bench_put(data):
    return _filled(data)


def bench_get(data):
    table = _filled(data)
    for k, _ in data:
        table.get(k)
    return table


def bench_contains(data):
    table = _filled(data)
    for k, _ in data:
        table.contains(k)
    return table


def bench_remove(data):
    table = _filled(data)
    for k, _ in data:
        table.remove(k)
    return table


def bench_keys(data):
    table = _filled(data)
    table.keys()
    return table


def bench_values(data):
    table = _filled(data)
    table.values()
    return table


def bench_items(data):
    table = _filled(data)
    table.items()
    return table


OPERATIONS = {
    "put": bench_put,
    "get": bench_get,
    "contains": bench_contains,
    "remove": bench_remove,
    "keys": bench_keys,
    "values": bench_values,
    "items": bench_items,
}


# ----------------------------
# Benchmark Runner
# ----------------------------

def run_benchmarks(output_file: str, base_input: int = 100, rounds: int = 8,
                   iterations: int = 5, seed: int = 0) -> int:
    """Run exponential performance tests; return the number of rows written."""
    if base_input < 1 or rounds < 1 or iterations < 1:
        raise ValueError("base_input, rounds and iterations must be positive")

    rng = random.Random(seed)
    input_sizes = [base_input * (2 ** i) for i in range(rounds)]
    rows = 0

    with open(output_file, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(CSV_HEADER)

        for op_name, op_func in OPERATIONS.items():
            for size in input_sizes:
                avg_time, std_time, capacity = measure_operation_time(op_func, size, iterations, rng)
                writer.writerow([size, op_name, f"{avg_time:.3f}", f"{std_time:.3f}", capacity])
                rows += 1
                print(f"{op_name:<10} | Size: {size:<8} | Avg Time: {avg_time:.3f} ms | "
                      f"Std: {std_time:.3f} ms | Capacity: {capacity}")

    print(f"\nBenchmark completed. Results saved to {output_file}")
    return rows
