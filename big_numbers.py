import argparse

from data_generation import DataSetGenerator
from number_words import (
    DISPLAY_ZEROS_LIMIT,
    MAX_ZEROS,
    clamp_zero_count,
    format_zeros_with_commas,
    fun_fact,
    name_for_zero_count,
    split_zero_count,
)


def describe_zero_count(zeros, use_dashes=False):
    name = name_for_zero_count(zeros, use_dashes)
    lines = [
        f"Zeros: {zeros:,}",
        f"Name: {name}",
        f"Length: {len(name)}",
        f"Power: 10^{zeros}",
    ]
    if zeros >= 6:
        illion_index, remainder = split_zero_count(zeros)
        lines.append(f"Illion index: {illion_index} (remainder {remainder})")
    if zeros <= DISPLAY_ZEROS_LIMIT:
        lines.append(f"Number: 1{format_zeros_with_commas(zeros)}")
    else:
        lines.append(f"Number: too many zeros to print (limit {DISPLAY_ZEROS_LIMIT:,})")
    fact = fun_fact(zeros)
    if fact:
        lines.append(f"Fun fact: {fact}")
    return lines


def name_table(start, end, use_dashes=False):
    return [
        f"{zeros:>6}  {name_for_zero_count(zeros, use_dashes)}"
        for zeros in range(start, end + 1)
    ]


def cmdline_parser():
    parser = argparse.ArgumentParser(
        description="Name powers of ten: 1 followed by N zeros.",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--spell",
        type=str,
        metavar="ZEROS",
        help="Print the name of 1 followed by ZEROS zeros.",
    )
    group.add_argument(
        "--table",
        type=int,
        nargs=2,
        metavar=("START", "END"),
        help="Print the names for every zero count from START to END.",
    )
    group.add_argument(
        "--generate-data",
        action="store_true",
        help="Generate train/test/eval name-length datasets.",
    )
    group.add_argument(
        "--data-probe",
        action="store_true",
        help=(
            "Generate dataset probes and open the report.\n"
            "Needs the tests/ folder, so run it from a source checkout."
        ),
    )
    parser.add_argument(
        "--dashes",
        action="store_true",
        help="Separate Latin morphemes with dashes (un-vigint-illion).",
    )
    parser.add_argument(
        "--max-zeros",
        type=int,
        default=None,
        help=(
            f"Upper bound for zero counts (default {MAX_ZEROS:,} for --spell\n"
            "and --table, 999,999 for --generate-data)."
        ),
    )
    parser.add_argument(
        "--output-dir",
        default="data",
        help="Output directory for generated datasets.",
    )
    parser.add_argument(
        "--train-size",
        type=int,
        default=20_000,
        help="Training set size for data generation.",
    )
    parser.add_argument(
        "--test-size",
        type=int,
        default=2_000,
        help="Test set size for data generation.",
    )
    parser.add_argument(
        "--eval-size",
        type=int,
        default=2_000,
        help="Eval set size for data generation.",
    )
    return parser


def main(argv=None):
    parser = cmdline_parser()
    args = parser.parse_args(argv)

    if args.max_zeros is not None and args.max_zeros < 0:
        parser.error("--max-zeros must be non-negative.")

    if args.spell is not None:
        max_zeros = MAX_ZEROS if args.max_zeros is None else args.max_zeros
        zeros = clamp_zero_count(args.spell, max_zeros)
        for line in describe_zero_count(zeros, args.dashes):
            print(line)
        return

    if args.table is not None:
        start, end = args.table
        if start < 0 or end < start:
            parser.error("--table needs 0 <= START <= END.")
        max_zeros = MAX_ZEROS if args.max_zeros is None else args.max_zeros
        if end > max_zeros:
            parser.error(f"--table END must not exceed --max-zeros ({max_zeros:,}).")
        for line in name_table(start, end, args.dashes):
            print(line)
        return

    if args.generate_data:
        max_zeros = 999_999 if args.max_zeros is None else args.max_zeros
        try:
            generator = DataSetGenerator(
                output_dir=args.output_dir,
                train_size=args.train_size,
                test_size=args.test_size,
                eval_size=args.eval_size,
                max_zeros=max_zeros,
                use_dashes=args.dashes,
            )
        except ValueError as exc:
            parser.error(str(exc))
        generator.generate_all()
        return

    if args.data_probe:
        try:
            from tests.data_probes import run_data_probes
        except ImportError:
            parser.error("--data-probe must be run from a source checkout with tests/.")

        run_data_probes(data_dir=args.output_dir)
        return

    parser.print_help()


if __name__ == "__main__":
    main()
