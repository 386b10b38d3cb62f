import yaml

from randgen.emit import write_frequency_plot, write_summary
from randgen.profiler.summary import Summarizer
from randgen.sampler.generator import Sampler


def build_summary(nums, probs, draws=1000):
    gen = Sampler(nums, probs, seed=15)
    gen.draw_many(draws)
    return Summarizer(gen)


def test_write_summary(tmp_path, example_nums, example_probs):
    summary = build_summary(example_nums, example_probs)
    path = tmp_path / "summary.yaml"

    write_summary(path, summary, metadata={"seed": 15}, significance=0.01)

    payload = yaml.safe_load(path.read_text(encoding="utf-8"))
    assert payload["metadata"] == {"seed": 15}
    assert payload["summary"]["n"] == 1000
    assert payload["summary"]["significance"] == 0.01
    assert len(payload["summary"]["outcomes"]) == len(example_nums)


def test_write_summary_without_metadata(tmp_path):
    path = tmp_path / "summary.yaml"

    write_summary(path, build_summary([6], [1.0], draws=10))

    payload = yaml.safe_load(path.read_text(encoding="utf-8"))
    assert "metadata" not in payload
    assert payload["summary"]["total_chi_squared"] == 0.0


def test_write_frequency_plot(tmp_path, example_nums, example_probs):
    path = tmp_path / "chart.png"

    write_frequency_plot(path, build_summary(example_nums, example_probs))

    assert path.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


def test_write_frequency_plot_without_draws(tmp_path, example_nums, example_probs):
    path = tmp_path / "empty.png"

    write_frequency_plot(path, build_summary(example_nums, example_probs, draws=0))

    assert path.exists()
