import pytest
import yaml

from randgen.config import DEFAULT_DRAWS, RunConfig, load_config
from randgen.errors import InvalidOutcomeError, ProbabilitySumError


def write_yaml(path, payload):
    path.write_text(yaml.safe_dump(payload), encoding="utf-8")
    return path


def test_load_full_config(tmp_path, example_nums, example_probs):
    spec = write_yaml(
        tmp_path / "run.yaml",
        {
            "outcomes": example_nums,
            "probabilities": example_probs,
            "generation": {"draws": 250, "seed": 25},
            "report": {"breakdown": False},
        },
    )

    cfg = load_config(spec)

    assert cfg == RunConfig(example_nums, example_probs, draws=250, seed=25, show_breakdown=False)


def test_defaults(tmp_path):
    spec = write_yaml(tmp_path / "run.yaml", {"outcomes": [1, 2], "probabilities": [0.5, 0.5]})

    cfg = load_config(spec)

    assert cfg.draws == DEFAULT_DRAWS
    assert cfg.seed is None
    assert cfg.show_breakdown is True


def test_seeded_config_builds_reproducible_samplers(example_nums, example_probs):
    cfg = RunConfig(example_nums, example_probs, draws=50, seed=3)

    first = cfg.build_sampler()
    second = cfg.build_sampler()

    assert first.draw_many(cfg.draws).tolist() == second.draw_many(cfg.draws).tolist()


def test_invalid_distribution_surfaces_on_build():
    cfg = RunConfig([1, 2], [0.6, 0.5])

    with pytest.raises(ProbabilitySumError):
        cfg.build_sampler()


@pytest.mark.parametrize(
    "payload",
    [
        {"probabilities": [1.0]},
        {"outcomes": [1]},
        {"outcomes": 1, "probabilities": [1.0]},
        {"outcomes": [1], "probabilities": [1.0], "generation": {"draws": -5}},
        {"outcomes": [1], "probabilities": [1.0], "generation": 5},
        {"outcomes": [1], "probabilities": [1.0], "report": ["breakdown"]},
    ],
)
def test_malformed_config(payload):
    with pytest.raises(ValueError):
        RunConfig.from_dict(payload)


def test_non_mapping_document(tmp_path):
    spec = tmp_path / "run.yaml"
    spec.write_text("- 1\n- 2\n", encoding="utf-8")

    with pytest.raises(ValueError):
        load_config(spec)


def test_float_outcome_in_config_is_not_truncated():
    cfg = RunConfig.from_dict({"outcomes": [1.7], "probabilities": [1.0]})

    with pytest.raises(InvalidOutcomeError):
        cfg.build_sampler()
