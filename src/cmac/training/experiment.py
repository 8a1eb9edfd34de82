"""
End-to-end CMAC experiment: generate x*sin(x) samples, split, train both
variants on the same split, and score them on the held-out samples.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from cmac.config.models import ExperimentConfig, ModelConfig, TrainingConfig, Variant
from cmac.data import generate_samples, shuffle_split, write_pairs
from cmac.models import ModelRegistry
from cmac.training.controller import LoggingObserver, MetricsObserver
from cmac.utils import InMemoryMetrics, Timer, get_logger

logger = get_logger("experiment")

Pair = Tuple[float, float]


def _train_and_score(
    registry: ModelRegistry,
    model_cfg: ModelConfig,
    training: TrainingConfig,
    train: Sequence[Pair],
    test: Sequence[Pair],
    sink: InMemoryMetrics,
) -> Dict[str, Any]:
    model = registry.from_config(model_cfg)
    variant = model_cfg.variant.value
    labels = {"variant": variant, "generalization_factor": str(model_cfg.generalization_factor)}
    observers = [LoggingObserver(variant), MetricsObserver(sink, **labels)]
    with Timer(sink, "training_time_ms", **labels) as timer:
        result = model.train(
            train,
            training.lower,
            training.upper,
            training.epochs,
            training.learning_rate,
            training.convergence_threshold,
            observers=observers,
        )
    predicted, accuracy = model.predict(test, training.lower, training.upper)
    return {
        "model": model,
        "result": result,
        "training_time_ms": timer.elapsed_ms,
        "test_accuracy": accuracy,
        "predicted": sorted(predicted),
    }


def run_experiment(cfg: ExperimentConfig, sink: Optional[InMemoryMetrics] = None) -> Dict[str, Any]:
    """
    Train discrete and continuous CMACs with identical hyperparameters.

    Returns per-variant stats keyed by variant name plus the train/test split.
    """
    sink = sink or InMemoryMetrics()
    registry = ModelRegistry()
    training = cfg.training
    data = generate_samples(cfg.points, training.lower, training.upper)
    train, test = shuffle_split(data, cfg.train_size, seed=cfg.seed)
    logger.info(
        f"Experiment: {len(train)} train / {len(test)} test samples, "
        f"g={cfg.model.generalization_factor}, weights={cfg.model.num_weights}"
    )

    stats: Dict[str, Any] = {"train": train, "test": test, "variants": {}}
    output_dir = Path(cfg.output_dir)
    for variant in Variant:
        model_cfg = replace(cfg.model, variant=variant)
        run = _train_and_score(registry, model_cfg, training, train, test, sink)
        logger.info(
            f"{variant.value}: generalization_factor={model_cfg.generalization_factor} "
            f"convergence_time_ms={run['training_time_ms']:.2f} test_accuracy={run['test_accuracy']:.4f}"
        )
        if cfg.write_outputs:
            run["files"] = [
                write_pairs(output_dir / f"{variant.value}_data.txt", sorted(data)),
                write_pairs(output_dir / f"{variant.value}_predicted_data.txt", run["predicted"]),
            ]
            logger.info(f"Wrote {variant.value} outputs to {output_dir}")
        stats["variants"][variant.value] = run
    return stats


def sweep_generalization_factors(
    train: Sequence[Pair],
    test: Sequence[Pair],
    model_cfg: ModelConfig,
    training: TrainingConfig,
    factors: Optional[Iterable[int]] = None,
    sink: Optional[InMemoryMetrics] = None,
) -> List[Dict[str, Any]]:
    """
    Train a fresh model per generalization factor and report convergence time
    and test accuracy. Defaults to 1..num_weights-1.
    """
    sink = sink or InMemoryMetrics()
    registry = ModelRegistry()
    if factors is None:
        factors = range(1, model_cfg.num_weights)
    rows: List[Dict[str, Any]] = []
    for g in factors:
        run = _train_and_score(
            registry, replace(model_cfg, generalization_factor=g), training, train, test, sink
        )
        logger.info(
            f"Generalization factor: {g} convergence_time_ms={run['training_time_ms']:.2f} "
            f"test_accuracy={run['test_accuracy']:.4f}"
        )
        rows.append(
            {
                "generalization_factor": g,
                "training_time_ms": run["training_time_ms"],
                "epochs_run": run["result"].epochs_run,
                "converged": run["result"].converged,
                "test_accuracy": run["test_accuracy"],
            }
        )
    return rows
