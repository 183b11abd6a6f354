import argparse
import logging
import sys

from . import ln_add_exp, ln_mean_exp, ln_sum_exp, resolve_width


def run(values: list[str], *, width: str = "f64", pairwise: bool = False, mean: bool = False) -> int:
    w = resolve_width(width)
    xs = [w.cast(v) for v in values]
    if pairwise:
        if len(xs) != 2:
            raise ValueError(f"--pairwise takes exactly two values, got {len(xs)}")
        result = ln_add_exp(xs[0], xs[1], w)
    elif mean:
        result = ln_mean_exp(xs, w)
    else:
        result = ln_sum_exp(xs, w)
    print(repr(float(result)))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="logsumexp",
        description=(
            "Compute log(sum(exp(v))) of the given values in a numerically "
            "stable way. 'inf', '-inf' and 'nan' are accepted."
        ),
    )
    parser.add_argument(
        "values",
        nargs="*",
        help="Values on the log scale (default: none, i.e. an empty sum).",
    )
    parser.add_argument(
        "--width",
        default="f64",
        choices=["f32", "f64"],
        help="Floating-point width to compute in (default: f64).",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--pairwise",
        action="store_true",
        help="Use log-add-exp on exactly two values.",
    )
    mode.add_argument(
        "--mean",
        action="store_true",
        help="Return the log of the mean of exp(v) instead of the sum.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return run(args.values, width=args.width, pairwise=args.pairwise, mean=args.mean)
    except ValueError as exc:
        parser.error(str(exc))


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
