import json
import re
from datetime import date, datetime, timedelta

import pytest

from benchboard.result import Result, current_date, current_time


def _sample(**overrides):
    data = {
        "title": "Baseline run",
        "model": "TAN",
        "version": "1.0",
        "score_name": "accuracy",
        "platform": "Galgo",
        "date": "2024-01-15",
        "time": "10:20:30",
        "stratified": False,
        "discretized": True,
        "duration": 42.5,
        "folds": 5,
        "seeds": [271],
        "results": [
            {"dataset": "iris", "score": 0.5},
            {"dataset": "wine", "score": 0.25},
        ],
    }
    data.update(overrides)
    return data


def _write(tmp_path, data, name="results_sample.json"):
    (tmp_path / name).write_text(json.dumps(data), encoding="utf-8")
    return name


def test_current_date_and_time_formats():
    today = current_date()
    now = current_time()
    parsed_date = datetime.strptime(today, "%Y-%m-%d")
    parsed_time = datetime.strptime(now, "%H:%M:%S")
    assert parsed_date.strftime("%Y-%m-%d") == today
    assert parsed_time.strftime("%H:%M:%S") == now
    assert abs(parsed_date.date() - date.today()) <= timedelta(days=1)


def test_new_result_has_empty_lists_and_timestamp():
    result = Result()
    assert result.data["results"] == []
    assert result.data["seeds"] == []
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}", result.date)
    assert re.fullmatch(r"\d{2}:\d{2}:\d{2}", result.time)


def test_load_sums_scores_and_marks_complete(tmp_path):
    name = _write(tmp_path, _sample())
    result = Result.load(tmp_path, name)
    assert result.score == pytest.approx(0.5 + 0.25)
    assert result.complete


def test_load_divides_by_best_score(tmp_path):
    name = _write(tmp_path, _sample())
    result = Result.load(tmp_path, name, {"accuracy": 0.75})
    assert result.score == pytest.approx(1.0)


def test_load_ignores_best_for_other_score(tmp_path):
    name = _write(tmp_path, _sample())
    result = Result.load(tmp_path, name, {"f1-macro": 0.75})
    assert result.score == pytest.approx(0.5 + 0.25)


def test_single_result_is_partial(tmp_path):
    name = _write(tmp_path, _sample(results=[{"dataset": "iris", "score": 0.5}]))
    assert not Result.load(tmp_path, name).complete


def test_load_missing_file(tmp_path):
    with pytest.raises(OSError, match="Unable to open result file"):
        Result.load(tmp_path, "results_missing.json")


def test_filename():
    result = Result(_sample())
    assert result.filename == "results_accuracy_TAN_Galgo_2024-01-15_10:20:30_0.json"


@pytest.mark.parametrize(
    "stratified,flag", [(True, "1"), (1, "1"), (False, "0"), (0, "0"), (2, "0")]
)
def test_filename_stratified_flag(stratified, flag):
    result = Result(_sample(stratified=stratified))
    assert result.filename.endswith(f"_{flag}.json")


def test_save_round_trip(tmp_path):
    original = Result(_sample(title="Título ñ"))
    original.save(tmp_path)
    loaded = Result.load(tmp_path, original.filename)
    assert loaded.data == original.data
    assert loaded.title == "Título ñ"


def test_title_setter_updates_data():
    result = Result(_sample())
    result.title = "Renamed"
    assert result.data["title"] == "Renamed"


def test_to_string_fields(tmp_path):
    name = _write(tmp_path, _sample())
    result = Result.load(tmp_path, name)
    tokens = result.to_string(5, 20).split()
    assert tokens[:3] == ["2024-01-15", "TAN", "accuracy"]
    assert float(tokens[3]) == pytest.approx(result.score)
    assert tokens[4:7] == ["Galgo", "D", "C"]


def test_to_string_both_flags_partial():
    result = Result(
        _sample(stratified=1, discretized=1, results=[{"dataset": "iris", "score": 1}])
    )
    tokens = result.to_string(5, 20).split()
    assert tokens[5:7] == ["SD", "P"]


def test_to_string_pads_title_to_fixed_width():
    short = Result(_sample(title="a")).to_string(5, 20)
    longer = Result(_sample(title="abcdef")).to_string(5, 20)
    assert len(short) == len(longer)


def test_to_string_truncates_long_title():
    title = "x" * 30
    line = Result(_sample(title=title)).to_string(5, 10)
    assert line.endswith(title[:9] + "…")


@pytest.mark.parametrize(
    "duration,unit,factor", [(30.0, "s", 1), (90.0, "m", 60), (7200.0, "h", 3600)]
)
def test_to_string_duration_units(duration, unit, factor):
    line = Result(_sample(duration=duration, title="x")).to_string(5, 1)
    tokens = line.split()
    assert tokens[-2] == unit
    assert float(tokens[-3]) * factor == pytest.approx(duration)