import os

import pytest

from benchboard.result import Result
from benchboard.results_manager import ResultsManager, SortField, SortType


def write_result(directory, model, date="2024-01-01", time="10:00:00", scores=(0.5,),
                 title="title", platform="pc", score_name="accuracy", duration=10.0):
    data = {
        "score_name": score_name,
        "model": model,
        "platform": platform,
        "date": date,
        "time": time,
        "stratified": False,
        "discretized": False,
        "title": title,
        "duration": duration,
        "seeds": [1],
        "results": [
            {"dataset": f"ds{i}", "score": s, "hyperparameters": {}}
            for i, s in enumerate(scores)
        ],
    }
    result = Result(data)
    result.save(directory)
    return result.filename


@pytest.fixture
def folder(tmp_path):
    write_result(tmp_path, "TAN", date="2024-01-02", scores=(0.9,), duration=5.0)
    write_result(tmp_path, "KDB", date="2024-01-01", scores=(0.7, 0.8), duration=50.0,
                 title="a much longer title")
    write_result(tmp_path, "AODELd", date="2024-01-03", scores=(0.6,), platform="other",
                 duration=1.0)
    (tmp_path / "notes.json").write_text("{}")
    (tmp_path / "results_readme.txt").write_text("x")
    return tmp_path


def test_load_reads_only_result_files(folder):
    manager = ResultsManager(folder)
    manager.load()
    assert sorted(r.model for r in manager) == ["AODELd", "KDB", "TAN"]


def test_load_filters_by_model_and_platform(folder):
    manager = ResultsManager(folder, model="TAN")
    manager.load()
    assert [r.model for r in manager] == ["TAN"]
    manager = ResultsManager(folder, platform="other")
    manager.load()
    assert [r.model for r in manager] == ["AODELd"]


def test_load_filters_complete_and_partial(folder):
    complete = ResultsManager(folder, complete=True)
    complete.load()
    assert [r.model for r in complete] == ["KDB"]
    partial = ResultsManager(folder, partial=True)
    partial.load()
    assert sorted(r.model for r in partial) == ["AODELd", "TAN"]


def test_max_sizes(folder):
    manager = ResultsManager(folder)
    manager.load()
    assert manager.max_model == len("AODELd")
    assert manager.max_title == len("a much longer title")


def test_max_sizes_have_minimum(tmp_path):
    write_result(tmp_path, "A", title="t")
    manager = ResultsManager(tmp_path)
    manager.load()
    assert manager.max_model == 5
    assert manager.max_title == 5


def test_empty_folder(tmp_path):
    manager = ResultsManager(tmp_path)
    manager.load()
    assert len(manager) == 0
    assert manager.max_model == 0


def test_sort_by_date(folder):
    manager = ResultsManager(folder)
    manager.load()
    manager.sort_results(SortField.DATE, SortType.DESC)
    dates = [r.date for r in manager]
    assert dates == sorted(dates, reverse=True)
    manager.sort_results(SortField.DATE, SortType.ASC)
    assert [r.date for r in manager] == sorted(dates)


def test_sort_by_duration_and_model(folder):
    manager = ResultsManager(folder)
    manager.load()
    manager.sort_results(SortField.DURATION, SortType.ASC)
    durations = [r.duration for r in manager]
    assert durations == sorted(durations)
    manager.sort_results(SortField.MODEL, SortType.DESC)
    models = [r.model for r in manager]
    assert models == sorted(models, reverse=True)


def test_sort_by_score_uses_best_scores(folder):
    manager = ResultsManager(folder, best_scores={"accuracy": 2.0})
    manager.load()
    manager.sort_results(SortField.SCORE, SortType.DESC)
    scores = [r.score for r in manager]
    assert scores == sorted(scores, reverse=True)
    assert manager[0].score == pytest.approx((0.7 + 0.8) / 2.0)


def test_same_date_ties_broken_by_model(tmp_path):
    write_result(tmp_path, "B", time="10:00:00")
    write_result(tmp_path, "A", time="11:00:00")
    manager = ResultsManager(tmp_path)
    manager.load()
    manager.sort_date(SortType.ASC)
    assert [r.model for r in manager] == ["A", "B"]
    manager.sort_date(SortType.DESC)
    assert [r.model for r in manager] == ["B", "A"]


def test_delete_result(folder):
    manager = ResultsManager(folder, model="TAN")
    manager.load()
    filename = manager[0].filename
    manager.delete_result(0)
    assert len(manager) == 0
    assert not os.path.exists(folder / filename)


def test_hide_result(folder, tmp_path_factory):
    hidden = tmp_path_factory.mktemp("hidden")
    manager = ResultsManager(folder, model="KDB")
    manager.load()
    filename = manager[0].filename
    manager.hide_result(0, hidden)
    assert len(manager) == 0
    assert (hidden / filename).exists()
    assert not (folder / filename).exists()


def test_index_errors(folder):
    manager = ResultsManager(folder)
    manager.load()
    assert len(manager) == 3
    assert [manager[i].model for i in range(3)] == [r.model for r in manager]
    with pytest.raises(IndexError) as past_end:
        manager[len(manager)]
    assert past_end.type is IndexError
    with pytest.raises(IndexError) as negative:
        manager[-1]
    assert negative.type is IndexError