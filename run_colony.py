# run_colony.py
import sys
import argparse

from antsys import (ACOConfig, ATSPInstance, InvalidDimension, IoFailure, TextTraceWriter,
                    run_rounds, save_rounds_csv)


def build_config(args):
    return ACOConfig(alpha=args.alpha, beta=args.beta, rho=args.rho, Q=args.Q, tau0=args.tau0,
                     n_ants=args.ants, start=args.start, seed=args.seed)


def load_instance(args):
    if args.csv:
        return ATSPInstance.from_csv(args.csv)
    if args.text:
        return ATSPInstance.from_text(args.text)
    return ATSPInstance.random_asymmetric(args.n, seed=args.seed, name=f"random{args.n}")


def build_argparser():
    ap = argparse.ArgumentParser(description="Run Ant System rounds on an asymmetric cost matrix.")
    src = ap.add_mutually_exclusive_group()
    src.add_argument("--csv", default=None, help="header-less CSV with a square cost matrix")
    src.add_argument("--text", default=None, help="whitespace separated square cost matrix")
    ap.add_argument("--n", type=int, default=5, help="number of cities for a random instance")
    ap.add_argument("--alpha", type=float, default=1.0)
    ap.add_argument("--beta", type=float, default=2.0)
    ap.add_argument("--rho", type=float, default=0.5, help="share of pheromone kept each round")
    ap.add_argument("--Q", type=float, default=1.0)
    ap.add_argument("--tau0", type=float, default=1.0, help="initial pheromone")
    ap.add_argument("--ants", type=int, default=3)
    ap.add_argument("--start", type=int, default=0, help="start city index for every ant")
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--rounds", type=int, default=1, help="how many times to run one iteration")
    ap.add_argument("--trace", default="-", help="trace file ('-' for stdout)")
    ap.add_argument("--no-trace", action="store_true")
    ap.add_argument("--csv-out", default=None, help="write per-ant results to this CSV")
    return ap


def main(argv=None):
    ap = build_argparser()
    args = ap.parse_args(argv)
    cfg = build_config(args)

    try:
        inst = load_instance(args)
        if args.no_trace:
            df, _ = run_rounds(inst, cfg, n_rounds=args.rounds)
        elif args.trace == "-":
            df, _ = run_rounds(inst, cfg, n_rounds=args.rounds, trace=TextTraceWriter(sys.stdout))
        else:
            with open(args.trace, "w", encoding="utf-8") as f:
                df, _ = run_rounds(inst, cfg, n_rounds=args.rounds, trace=TextTraceWriter(f))
    except (InvalidDimension, IndexError, IoFailure) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(f"{inst.name}: {inst.n_cities()} cities, {cfg.n_ants} ants, {args.rounds} round(s)")
    for row in df.itertuples(index=False):
        print(f"round {row.round} ant {row.ant}: {row.path} (cost: {row.cost})")

    if args.csv_out:
        save_rounds_csv(df, args.csv_out)
        print("Saved:", args.csv_out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
