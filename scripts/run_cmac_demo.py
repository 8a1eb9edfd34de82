#!/usr/bin/env python3
"""
Train discrete and continuous CMACs on x*sin(x) and write prediction pairs.

Usage:
  pip install -e .
  python scripts/run_cmac_demo.py
  python scripts/run_cmac_demo.py --config cmac-config.json --output-dir outputs
  python scripts/run_cmac_demo.py --generalization-factor 4 --epochs 500
  python scripts/run_cmac_demo.py --sweep
"""

import argparse
from dataclasses import replace
from pathlib import Path

from cmac.config import load_experiment_config
from cmac.data import generate_samples, shuffle_split
from cmac.training.experiment import run_experiment, sweep_generalization_factors
from cmac.utils import configure_logging, get_logger


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="CMAC function approximation demo")
    parser.add_argument("--config", type=Path, default=None, help="Experiment config JSON")
    parser.add_argument("--generalization-factor", type=int, default=None)
    parser.add_argument("--num-weights", type=int, default=None)
    parser.add_argument("--epochs", type=int, default=None)
    parser.add_argument("--learning-rate", type=float, default=None)
    parser.add_argument("--output-dir", type=str, default=None)
    parser.add_argument("--no-write", action="store_true", help="Skip writing prediction files")
    parser.add_argument("--sweep", action="store_true", help="Sweep generalization factors (discrete)")
    parser.add_argument("--log-level", type=str, default=None)
    parser.add_argument("--json-logs", action="store_true")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    configure_logging(level=args.log_level, json_output=args.json_logs)
    logger = get_logger("demo")

    cfg = load_experiment_config(args.config)
    model = cfg.model
    if args.generalization_factor is not None:
        model = replace(model, generalization_factor=args.generalization_factor)
    if args.num_weights is not None:
        model = replace(model, num_weights=args.num_weights)
    training = cfg.training
    if args.epochs is not None:
        training = replace(training, epochs=args.epochs)
    if args.learning_rate is not None:
        training = replace(training, learning_rate=args.learning_rate)
    cfg = replace(cfg, model=model, training=training)
    if args.output_dir:
        cfg = replace(cfg, output_dir=args.output_dir)
    if args.no_write:
        cfg = replace(cfg, write_outputs=False)

    if args.sweep:
        data = generate_samples(cfg.points, training.lower, training.upper)
        train, test = shuffle_split(data, cfg.train_size, seed=cfg.seed)
        for row in sweep_generalization_factors(train, test, cfg.model, cfg.training):
            logger.info(
                f"g={row['generalization_factor']} time_ms={row['training_time_ms']:.2f} "
                f"epochs={row['epochs_run']} accuracy={row['test_accuracy']:.4f}"
            )
        return

    stats = run_experiment(cfg)
    for name, run in stats["variants"].items():
        logger.info(
            f"{name}: epochs={run['result'].epochs_run} ({run['result'].stop_reason}) "
            f"convergence_time_ms={run['training_time_ms']:.2f} test_accuracy={run['test_accuracy']:.4f}"
        )


if __name__ == "__main__":
    main()
