import os
import sys
import csv
import random
import time
import statistics

# Ensure we can import from the project
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from hashrelation.datastructures.hash_relation import HashRelation

# Fixed bucket count: the table never grows, so the load factor rises with size
BUCKETS = 1024

# ----------------------------
# Helper Functions
# ----------------------------

def generate_random_pairs(size: int):
    """Generate a list of random (x, y) pairs with repeated x and y values."""
    return [(random.randint(0, size // 4 + 1), random.randint(0, size // 4 + 1)) for _ in range(size)]

def build(data):
    rel = HashRelation(BUCKETS)
    rel.bulk_add(data)
    return rel

def measure_operation_time(operation, input_size: int, iterations: int = 5):
    """Run the operation multiple times and return average + std deviation (ms).

    Only the operation itself is timed; building the relation is not.
    """
    times = []
    for _ in range(iterations):
        data = generate_random_pairs(input_size)
        rel = build(data)
        start = time.perf_counter()
        operation(rel, data)
        end = time.perf_counter()
        times.append((end - start) * 1000)  # convert to milliseconds

    avg_time = statistics.mean(times)
    std_dev = statistics.stdev(times) if len(times) > 1 else 0.0
    return avg_time, std_dev

# ----------------------------
# Operations to Benchmark
# ----------------------------

def op_add(rel, data):
    for x, y in data[:100]:
        rel.add_pair(x, y + 1)

def op_contains(rel, data):
    for x, y in data[:100]:
        rel.contains_pair(x, y)

def op_y_values(rel, data):
    for x, _ in data[:100]:
        rel.y_values_given_x(x)

def op_x_values(rel, data):
    for _, y in data[:10]:
        rel.x_values_given_y(y)

def op_remove(rel, data):
    for x, y in data[:100]:
        rel.remove_pair(x, y)

def op_remove_given_x(rel, data):
    for x, _ in data[:100]:
        rel.remove_all_pairs_given_x(x)

def op_remove_given_y(rel, data):
    for _, y in data[:10]:
        rel.remove_all_pairs_given_y(y)

# ----------------------------
# Benchmark Runner
# ----------------------------

def run_benchmarks(output_file: str, base_input: int = 100):
    """Run exponential performance tests for HashRelation operations."""
    operations = {
        "add_pair": op_add,
        "contains_pair": op_contains,
        "y_values_given_x": op_y_values,
        "x_values_given_y": op_x_values,
        "remove_pair": op_remove,
        "remove_given_x": op_remove_given_x,
        "remove_given_y": op_remove_given_y,
    }

    input_sizes = [base_input * (2 ** i) for i in range(10)]

    with open(output_file, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow([
            "Input Size",
            "Operation",
            "Load Factor",
            "Average Time (ms)",
            "Standard Deviation (ms)",
        ])

        for op_name, op_func in operations.items():
            for size in input_sizes:
                load = build(generate_random_pairs(size)).load_factor()
                avg_time, std_time = measure_operation_time(op_func, size)
                writer.writerow([size, op_name, f"{load:.2f}", f"{avg_time:.3f}", f"{std_time:.3f}"])
                print(f"{op_name:<18} | Size: {size:<8} | Load: {load:<7.2f} | "
                      f"Avg Time: {avg_time:.3f} ms | Std: {std_time:.3f} ms")

    print(f"\nBenchmark completed. Results saved to {output_file}")

# ----------------------------
# Main Entry Point
# ----------------------------

if __name__ == "__main__":
    OUTPUT_CSV = "hash_relation_performance.csv"
    run_benchmarks(OUTPUT_CSV, base_input=100)
