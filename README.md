# benchboard

benchboard lets you browse, sort and tidy up the results of machine-learning
experiments from the terminal.

Every experiment is a JSON file named
`results_<score>_<model>_<platform>_<date>_<time>_<stratified>.json`, kept in a
results directory. benchboard reads those files, shows them as a paged,
colour-coded table, and lets you open the report of any experiment, look at a
single dataset of it in detail, change titles, hide results in another
directory, or delete them.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## The interactive screen

```
benchboard --help
```

lists the options of the command:

- `--path` – the results directory (default `results`)
- `--hidden` – an existing directory that hidden results are moved to
  (default `hidden_results`)
- `-m/--model`, `-s/--score`, `-p/--platform` – list only results of that
  model, score name or platform (default `any`)
- `--complete` or `--partial` – list only results with more than one dataset,
  or only those with a single one
- `--compare` – mark each score in reports against the best known result,
  read from `best_results_<score>_<model>.json` in the results directory

The bottom line of the screen lists the commands, with the key for each
highlighted. In the experiment list they are `q`uit, `l`ist, `D`elete,
`d`atasets, `h`ide, `s`ort, `r`eport, `t`itle, set `A`, set `B`, `p`age,
and `+` / `-` to move between pages. Commands that act on one experiment take
its number, for example `r 3`; a bare number opens the report of that
experiment. Inside a report, `r <n>` (or a bare number) shows dataset `n` in
detail, `b` goes back to the report and `l` back to the list. Deleting and
hiding ask for confirmation first; `t` asks for a new title and saves it in
the result file. The end of input quits.

`s` opens a second menu: `d`ate, `s`core, `t`ime or `m`odel choose the sort
key, `+` and `-` the direction.

A report shows one row per dataset with the score and its standard deviation,
the timings and the hyperparameters used. When a single dataset is shown, the
notes, per-fold scores and timings follow.

## Using the pieces

The building blocks can be used on their own. The paginator keeps track of
which lines of a long listing fit on the current page:

```python
from benchboard.paginator import Paginator

pages = Paginator(10, 35, 1)
pages.offset()      # (0, 9)
pages.add_page()    # True, now on page 2
pages.offset()      # (10, 19)
pages.set_page(4)   # True
pages.lines()       # 5
pages.add_page()    # False, there is no page 5
```

Other modules:

- `benchboard.result.Result` – one result file: `load`, `save`, `filename`
  and a one-line `to_string` summary
- `benchboard.results_manager.ResultsManager` – the filtered collection of
  results of a directory, sortable by `SortField` and `SortType`, with
  `hide_result` and `delete_result`
- `benchboard.results_dataset.ResultsDataset` and
  `benchboard.results_dataset_console.ResultsDatasetConsole` – the results of
  one dataset across experiments, and a console listing of them with the best
  scores highlighted
- `benchboard.datasets_console.DatasetsConsole` – a table of datasets,
  described by `DatasetInfo`, with their size and class balance
- `benchboard.report_console.ReportConsole` – the console report of one
  experiment
- `benchboard.options_menu.OptionsMenu` – the one-letter command prompt
- `benchboard.manage_view.ManageView` and
  `benchboard.manage_screen.ManageScreen` – the screens and command loop

## What it does not do

- There is no spreadsheet export and no side-by-side report of the
  experiments set as A and B; setting A and B only marks them in the status
  line.
- benchboard does not read dataset files. The datasets view, and the marks
  that compare an accuracy with the ZeroR baseline, use only the
  `DatasetInfo` entries and class counts given to `ManageScreen` or
  `ReportConsole`; the `benchboard` command gives none, so from the command
  the datasets view is empty and no ZeroR marks are shown.
- It does not run experiments; it only reads and manages their result files.