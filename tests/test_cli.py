import json

from maze_pathfinder import cli
from maze_pathfinder.config import COMPLEXITY_SIZES, maze_size_for_complexity


def test_complexity_tiers():
    assert maze_size_for_complexity("easy") == 15
    assert maze_size_for_complexity("hard") == 35
    assert maze_size_for_complexity("unknown") == COMPLEXITY_SIZES["medium"]


def test_single_search_prints_result(capsys):
    exit_code = cli.main(["--complexity", "easy", "--seed", "4", "--algorithm", "bfs", "--print"])
    assert exit_code == 0
    out = capsys.readouterr().out
    assert "bfs: path of" in out
    assert "S" in out and "E" in out


def test_compare_all_algorithms_with_report_and_image(tmp_path, capsys):
    report_path = tmp_path / "report.json"
    image_path = tmp_path / "maze.png"
    exit_code = cli.main(
        [
            "--width", "11",
            "--height", "11",
            "--seed", "8",
            "--algorithm", "all",
            "--report", str(report_path),
            "--image", str(image_path),
            "--cell-size", "4",
        ]
    )
    assert exit_code == 0
    assert image_path.exists()
    report = json.loads(report_path.read_text(encoding="utf-8"))
    assert len(report) == 1
    entry = report[0]
    assert entry["start"] == [1, 1]
    assert entry["end"] == [9, 9]
    names = [result["algorithm"] for result in entry["results"]]
    assert sorted(names) == sorted(cli.available_algorithms())
    lengths = {result["algorithm"]: result["length"] for result in entry["results"]}
    assert lengths["bfs"] == lengths["dijkstra"] == lengths["bidirectional"]
    out = capsys.readouterr().out
    assert "dijkstra:" in out


def test_batch_mode_prints_summary(capsys):
    exit_code = cli.main(["--width", "9", "--height", "9", "--seed", "1", "--count", "3", "--algorithm", "all"])
    assert exit_code == 0
    out = capsys.readouterr().out
    assert "avg expanded" in out
    assert "greedyBestFirst" in out


def test_even_dimensions_fall_back_to_a_passable_end(capsys):
    assert cli.main(["--width", "10", "--height", "10", "--seed", "2"]) == 0
    assert "bfs:" in capsys.readouterr().out


def test_invalid_input_exits_with_error():
    assert cli.main(["--width", "2", "--height", "9"]) == 2
    assert cli.main(["--width", "9", "--height", "9", "--start", "0", "0"]) == 2
    assert cli.main(["--width", "9", "--height", "9", "--start", "1", "1", "--end", "1", "1"]) == 2
    assert cli.main(["--count", "0"]) == 2
