"""
Benchmark functions for the two factor Libor market model.
Checks the martingale property of the futures advance and times the Monte Carlo
par coupon for a set of flat curves.
"""

import argparse
import logging
import time

import numpy as np

from lmm_curve import (
    DEFAULT_SEED,
    MARTINGALE_N,
    Curve,
    RandomSource,
    martingale_error,
    par_coupon,
    simulate_par_coupons,
    to_futures,
)

INPUTS = [
    # u, maturity, alpha, sigma, forward
    (0.5, 5.0, 0.0, 0.20, 0.06),
    (1.0, 5.0, 0.5, 0.20, 0.06),
    (2.0, 5.0, 0.5, 0.20, 0.06),
    (1.0, 10.0, 1.0, 0.15, 0.05),
    (5.0, 10.0, 1.0, 0.15, 0.05),
    (2.0, 20.0, 2.0, 0.10, 0.04),
    (10.0, 20.0, 2.0, 0.10, 0.04),
]


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Run curve advance benchmarks with configurable logging."
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Set the logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    parser.add_argument(
        "--paths", type=int, default=MARTINGALE_N, help="Monte Carlo paths per case"
    )
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED, help="Random seed")
    parser.add_argument(
        "--antithetic", action="store_true", help="Use antithetic sampling"
    )
    parser.add_argument(
        "--output", type=str, default="benchmarks.csv", help="Results file"
    )
    return parser.parse_args(argv)


def configure_logging(level: str):
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler("application.log", mode="w"),
        ],
    )


def write_results_to_file(results, filename):
    """
    Write the results array to a file in a tabular format.

    Args:
        results: List of tuples containing the results
        filename: The name of the file to write the results to
    """
    with open(filename, "w") as f:
        f.write("u,Maturity,Alpha,Sigma,Forward,MaxError,MaxStdErr,Par0,ParU,ParUSd\n")
        for result in results:
            f.write(",".join(str(x) for x in result) + "\n")


def run_case(u, maturity, alpha, sigma, forward, n_paths, rng, antithetic=False):
    """
    Benchmark a single flat curve with semi-annual buckets.

    Returns:
        tuple: the inputs followed by the worst martingale error, its standard error,
            today's par coupon and the mean and standard deviation of the par coupon at u
    """
    times = np.arange(0.5, maturity + 0.25, 0.5)

    futures = Curve.flat(times, forward, sigma)
    to_futures(futures)
    error, std_err = martingale_error(u, futures, alpha, n_paths, rng, antithetic)
    worst = int(np.argmax(np.abs(error)))

    forwards = Curve.flat(times, forward, sigma)
    par_0 = par_coupon(forwards)
    par_u = simulate_par_coupons(u, forwards, alpha, n_paths, rng, antithetic)

    logging.debug(
        f"u={u}, maturity={maturity}, alpha={alpha}, sigma={sigma}, forward={forward}"
    )
    logging.debug(
        f"Martingale error: {error[worst]:.6f} (std err {std_err[worst]:.6f})"
    )
    return (
        u,
        maturity,
        alpha,
        sigma,
        forward,
        error[worst],
        std_err[worst],
        par_0,
        np.mean(par_u),
        np.std(par_u, ddof=1),
    )


def table(n_paths, seed, antithetic=False):
    """
    Run every case in INPUTS and report the martingale errors.
    """
    rng = RandomSource(seed)
    results = []
    start_benchmark_time = time.perf_counter()
    for u, maturity, alpha, sigma, forward in INPUTS:
        start_time = time.perf_counter()
        logging.info(f"Simulating {n_paths} paths (u={u}, maturity={maturity})...")
        result = run_case(u, maturity, alpha, sigma, forward, n_paths, rng, antithetic)
        if abs(result[5]) > 5 * result[6]:
            logging.warning(
                f"Martingale error {result[5]:.6f} exceeds five standard errors for u={u}, maturity={maturity}"
            )
        results.append(result)
        logging.debug(
            f"Elapsed time for case: {time.perf_counter() - start_time:.2f} seconds"
        )
    logging.info(
        f"Elapsed time for benchmark: {time.perf_counter() - start_benchmark_time:.2f} seconds"
    )
    return results


if __name__ == "__main__":
    args = parse_args()
    configure_logging(args.log_level)
    results = table(args.paths, args.seed, args.antithetic)
    write_results_to_file(results, args.output)
    logging.info(f"Results written to {args.output}")
