import pytest

from benchboard.result import Result
from benchboard.results_dataset import ResultsDataset


def write_result(directory, model, date="2024-01-01", time="10:00:00", items=()):
    data = {
        "score_name": "accuracy",
        "model": model,
        "platform": "pc",
        "date": date,
        "time": time,
        "stratified": False,
        "discretized": False,
        "title": "title",
        "duration": 1.0,
        "seeds": [1],
        "results": [
            {"dataset": name, "score": score, "hyperparameters": hyper}
            for name, score, hyper in items
        ],
    }
    result = Result(data)
    result.save(directory)
    return result.filename


@pytest.fixture
def folder(tmp_path):
    write_result(tmp_path, "TAN", date="2024-01-01", items=[("iris", 0.7, {})])
    write_result(tmp_path, "TAN", date="2024-01-03", items=[("iris", 0.9, {})])
    write_result(tmp_path, "KDB", date="2024-01-02",
                 items=[("wine", 0.5, {}), ("iris", 0.8, {"k": "x" * 40})])
    write_result(tmp_path, "AODE", items=[("wine", 0.95, {})])
    return tmp_path


def test_load_only_results_with_dataset(folder):
    results = ResultsDataset(folder, "iris")
    results.load()
    assert len(results) == 3
    assert {r.model for r in results} == {"TAN", "KDB"}


def test_model_filter(folder):
    results = ResultsDataset(folder, "iris", model="KDB")
    results.load()
    assert [r.model for r in results] == ["KDB"]


def test_max_values(folder):
    results = ResultsDataset(folder, "iris")
    results.load()
    assert results.max_result == pytest.approx(0.9)
    assert results.max_hyper == len('{"k":"' + "x" * 40 + '"}')
    assert results.max_model == 5
    assert results.max_file == max(len(r.filename) for r in results)


def test_defaults_when_nothing_found(folder):
    results = ResultsDataset(folder, "glass")
    results.load()
    assert len(results) == 0
    assert results.max_hyper == 15
    assert results.max_model == 0


def test_sort_model(folder):
    results = ResultsDataset(folder, "iris")
    results.load()
    results.sort_model()
    assert [(r.model, r.date) for r in results] == [
        ("KDB", "2024-01-02"),
        ("TAN", "2024-01-03"),
        ("TAN", "2024-01-01"),
    ]


def test_sort_model_same_date_newest_time_first(tmp_path):
    write_result(tmp_path, "TAN", time="09:00:00", items=[("iris", 0.1, {})])
    write_result(tmp_path, "TAN", time="12:00:00", items=[("iris", 0.2, {})])
    results = ResultsDataset(tmp_path, "iris")
    results.load()
    results.sort_model()
    assert [r.time for r in results] == ["12:00:00", "09:00:00"]


def test_negative_index_rejected(folder):
    results = ResultsDataset(folder, "iris")
    results.load()
    results.sort_model()
    assert results[len(results) - 1].date == "2024-01-01"
    with pytest.raises(IndexError) as negative:
        results[-1]
    assert negative.type is IndexError