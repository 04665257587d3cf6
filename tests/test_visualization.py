from core.process import Process
from schedulers.round_robin import simulate
from utils.visualization import Visualizer


def _result():
    return simulate([Process(0, 0, [300])], time_quantum=100, context_switch_overhead=10)


def test_render_text_gantt():
    text = Visualizer().render_text_gantt(_result())
    bar, axis = text.splitlines()
    assert bar.count("P0") == 3
    assert bar.count("CS") == 2
    assert axis.startswith("0")
    assert axis.rstrip().endswith("320")


def test_render_text_gantt_marks_idle():
    result = simulate([Process(0, 10, [4])], time_quantum=4, context_switch_overhead=0)
    assert "." in Visualizer().render_text_gantt(result).splitlines()[0]


def test_render_empty_timeline():
    result = simulate([], time_quantum=4, context_switch_overhead=0)
    assert Visualizer().render_text_gantt(result) == "(empty timeline)"


def test_draw_gantt_chart_saves_png(tmp_path):
    path = tmp_path / "gantt.png"
    Visualizer().draw_gantt_chart(_result(), save_path=str(path), show=False)
    assert path.exists()
    assert path.stat().st_size > 0


def test_tables_include_process_metrics():
    visualizer = Visualizer()
    result = _result()
    assert "320" in visualizer.format_statistics_table(result)
    details = visualizer.format_process_details(result)
    assert details.splitlines()[5].split() == ["0", "0", "300", "0", "0", "320", "0", "320", "0"]
