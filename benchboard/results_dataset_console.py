"""Console listing of every result obtained on one dataset."""

from __future__ import annotations

import json
import os
import sys

from .console import Colors, PagedReport
from .results_dataset import ResultsDataset


class ResultsDatasetConsole(PagedReport):
    """Lists the scores of a dataset across experiments, best ones highlighted."""

    def report(
        self,
        path: str | os.PathLike,
        dataset: str,
        score: str,
        model: str,
    ) -> bool:
        """Build the listing; False, with a message on stderr, if nothing was found."""
        results = ResultsDataset(path, dataset, model, score)
        results.load()
        if len(results) == 0:
            sys.stderr.write(
                f"{Colors.RED}No results found for dataset {dataset} and model "
                f"{model}{Colors.RESET}\n"
            )
            return False
        results.sort_model()
        max_model = results.max_model
        max_hyper = results.max_hyper
        max_result = results.max_result
        rows: list[dict] = []
        max_models: dict[str, float] = {}
        for result in results:
            max_models.setdefault(result.model, 0)
            for item in result.data["results"]:
                if item["dataset"] == dataset:
                    item_score = float(item["score"])
                    rows.append(
                        {
                            "date": result.date,
                            "time": result.time,
                            "model": result.model,
                            "score": item_score,
                            "hyperparameters": json.dumps(
                                item["hyperparameters"],
                                separators=(",", ":"),
                                ensure_ascii=False,
                            ),
                        }
                    )
                    if item_score > max_models[result.model]:
                        max_models[result.model] = item_score
                    break
        self.data = {
            "dataset": dataset,
            "score": score,
            "model": model,
            "lengths": {"maxModel": max_model, "maxHyper": max_hyper},
            "maxResult": max_result,
            "results": rows,
            "max_models": max_models,
        }
        self.header = [
            f"{Colors.GREEN}Results of dataset {dataset} - for {model} model\n"
            f"There are {len(results)} results\n"
            f"{Colors.GREEN} #  {'Model':<{max_model + 1}}"
            "Date       Time     Score       Hyperparameters\n"
            f"=== {'=' * max_model} ========== ======== =========== {'=' * max_hyper}\n"
        ]
        self.body = []
        for i, item in enumerate(rows):
            row_score = item["score"]
            color = Colors.BLUE if i % 2 else Colors.CYAN
            if row_score == max_models[item["model"]]:
                color = Colors.YELLOW
            if row_score == max_result:
                color = Colors.RED
            self.body.append(
                f"{color}{i:>3} "
                f"{item['model']:<{max_model}} "
                f"{color}{item['date']} "
                f"{color}{item['time']} "
                f"{row_score:11.9f} "
                f"{item['hyperparameters']}\n"
            )
        return True