import csv
import os
import random

from number_words import name_for_zero_count

TRAIN_SEED_MAX = 303


class DataSetGenerator:
    def __init__(
        self,
        output_dir="data",
        train_size=20_000,
        test_size=2_000,
        eval_size=2_000,
        min_zeros=0,
        max_zeros=999_999,
        use_dashes=False,
        seed=42,
    ):
        if min_zeros < 0 or max_zeros < min_zeros:
            raise ValueError(
                f"Invalid zero range: {min_zeros}..{max_zeros}."
            )
        available = max_zeros - min_zeros + 1
        requested = train_size + test_size + eval_size
        if requested > available:
            raise ValueError(
                f"Requested {requested} unique zero counts but the range "
                f"{min_zeros}..{max_zeros} only holds {available}."
            )
        seeded = len(self._seed_values(min_zeros, max_zeros))
        if train_size < seeded:
            raise ValueError(
                f"train_size must be at least {seeded} to hold the seed values."
            )
        self.output_dir = output_dir
        self.train_size = train_size
        self.test_size = test_size
        self.eval_size = eval_size
        self.min_zeros = min_zeros
        self.max_zeros = max_zeros
        self.use_dashes = use_dashes
        self.rng = random.Random(seed)

    @staticmethod
    def _seed_values(min_zeros, max_zeros):
        return set(range(min_zeros, min(TRAIN_SEED_MAX, max_zeros) + 1))

    def _write_csv(self, path, rows):
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        with open(path, "w", newline="", encoding="utf-8") as handle:
            writer = csv.writer(handle)
            writer.writerows(rows)

    def _sample_train_values(self):
        values = self._seed_values(self.min_zeros, self.max_zeros)
        while len(values) < self.train_size:
            values.add(self.rng.randint(self.min_zeros, self.max_zeros))
        return values

    def _sample_unique(self, size, excluded):
        values = set()
        while len(values) < size:
            value = self.rng.randint(self.min_zeros, self.max_zeros)
            if value not in excluded:
                values.add(value)
        return values

    def _generate_values(self):
        train_values = self._sample_train_values()
        test_values = self._sample_unique(self.test_size, train_values)
        eval_values = self._sample_unique(
            self.eval_size, train_values | test_values
        )
        return {
            "train": sorted(train_values),
            "test": sorted(test_values),
            "eval": sorted(eval_values),
        }

    def _label_for_zeros(self, zeros):
        return len(name_for_zero_count(zeros, self.use_dashes))

    def _write_split(self, format_name, formatter, values_by_split):
        for split_name, values in values_by_split.items():
            rows = [
                (formatter(value), str(self._label_for_zeros(value)))
                for value in values
            ]
            filename = f"{format_name}-{split_name}.csv"
            path = os.path.join(self.output_dir, filename)
            self._write_csv(path, rows)
            print(f"Wrote {filename} with {len(rows)} rows.")

    def generate_int_format(self, values_by_split):
        self._write_split("int", str, values_by_split)

    def generate_all(self):
        values_by_split = self._generate_values()
        self.generate_int_format(values_by_split)
        return values_by_split
