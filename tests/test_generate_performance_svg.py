import pytest

from generate_performance_svg import load_results, main, render_svg


@pytest.fixture
def results_csv(tmp_path):
    path = tmp_path / "results.csv"
    path.write_text(
        "algorithm,n,seconds,comparisons,moves\n"
        "Bucket Sort,1000,0.004,9000,900\n"
        "Radix Sort,1000,0.010,1000,8000\n"
        "Bucket Sort,100,0.0003,700,90\n"
        "Radix Sort,100,0.0009,100,600\n"
    )
    return path


def test_load_results_groups_and_orders(results_csv):
    data = load_results(results_csv)
    assert data["Bucket Sort"] == [(100, 0.0003), (1000, 0.004)]
    assert data["Radix Sort"] == [(100, 0.0009), (1000, 0.010)]


def test_render_svg(results_csv):
    svg = render_svg(load_results(results_csv))
    assert svg.startswith("<svg")
    assert svg.endswith("</svg>")
    assert "Bucket Sort" in svg
    assert "Radix Sort" in svg
    assert svg.count("<polyline") == 2


def test_render_svg_requires_data():
    with pytest.raises(ValueError):
        render_svg({})


def test_main_writes_file(results_csv, tmp_path):
    out = tmp_path / "img" / "perf.svg"
    main([str(results_csv), str(out)])
    assert out.read_text().startswith("<svg")
