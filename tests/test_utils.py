import math
import random
import statistics

import pytest

from darkweave import utils


def test_basecfg_strips_directories_and_extensions():
    assert utils.basecfg("cfg/yolo.cfg") == "yolo"
    assert utils.basecfg("a/b/c.d.e") == "c"
    assert utils.basecfg("plain") == "plain"


def test_alphanum_round_trip():
    for i in range(36):
        assert utils.alphanum_to_int(utils.int_to_alphanum(i)) == i
    assert utils.int_to_alphanum(36) == "."


def test_find_replace_only_first_occurrence():
    assert utils.find_replace("a/images/b/images", "images", "labels") == "a/labels/b/images"
    assert utils.find_replace("nothing here", "images", "labels") == "nothing here"


def test_top_k_orders_descending_and_pads():
    values = [0.1, 0.9, 0.5, 0.9, 0.3]
    picked = utils.top_k(values, 3)
    assert [values[i] for i in picked] == sorted(values, reverse=True)[:3]
    assert picked[0] < picked[1]
    assert utils.top_k([1.0], 3) == [0, -1, -1]


def test_strip_and_strip_char():
    assert utils.strip(" a b\t\nc ") == "abc"
    assert utils.strip_char("a-b--c", "-") == "abc"


def test_split_str_keeps_empty_fields():
    assert utils.split_str("a,b,,c", ",") == ["a", "b", "", "c"]


def test_parse_csv_line_respects_quotes():
    assert utils.parse_csv_line('a,"b,c",d') == ["a", '"b,c"', "d"]


def test_count_fields_matches_split():
    for line in ["1,2,3", "", "x", ",,"]:
        assert utils.count_fields(line) == len(utils.split_str(line, ","))


def test_parse_fields_values_nan_and_padding():
    fields = utils.parse_fields("1.5,,abc,2\r", 4)
    assert fields[0] == 1.5
    assert math.isnan(fields[1])
    assert math.isnan(fields[2])
    assert fields[3] == 2.0
    assert utils.parse_fields("1", 3) == [1.0, 0.0, 0.0]
    assert len(utils.parse_fields("1,2,3,4", 2)) == 2


def test_statistics_helpers():
    values = [1.0, 4.0, 2.5, 7.0]
    assert math.isclose(utils.sum_array(values), math.fsum(values))
    assert math.isclose(utils.mean_array(values), statistics.mean(values))
    assert math.isclose(utils.variance_array(values), statistics.pvariance(values))
    assert math.isclose(utils.mag_array(values), math.hypot(*values))
    assert math.isclose(utils.mse_array(values), math.hypot(*values) / math.sqrt(len(values)))


def test_mean_arrays_is_columnwise_mean():
    arrays = [[1.0, 2.0], [3.0, 6.0], [5.0, 1.0]]
    result = utils.mean_arrays(arrays)
    for i, value in enumerate(result):
        assert math.isclose(value, statistics.mean(row[i] for row in arrays))


def test_normalize_gives_zero_mean_unit_variance():
    result = utils.normalize_array([2.0, 4.0, 4.0, 5.0, 9.0])
    assert math.isclose(statistics.mean(result), 0.0, abs_tol=1e-12)
    assert math.isclose(statistics.pvariance(result), 1.0)


def test_translate_and_scale_round_trip():
    values = [1.0, -2.0, 3.5]
    assert utils.translate_array(utils.translate_array(values, 2.5), -2.5) == values
    back = utils.scale_array(utils.scale_array(values, 4.0), 0.25)
    assert all(math.isclose(a, b) for a, b in zip(back, values))


def test_constrain_clamps():
    assert utils.constrain_int(5, 0, 3) == 3
    assert utils.constrain_int(-5, 0, 3) == 0
    assert utils.constrain_int(2, 0, 3) == 2
    assert utils.constrain(0.0, 1.0, 1.5) == 1.0
    assert utils.constrain(0.0, 1.0, -0.5) == 0.0


def test_dist_array():
    a = [1.0, 2.0, 3.0, 4.0]
    b = [2.0, 0.0, 5.0, 9.0]
    assert utils.dist_array(a, a, 1) == 0.0
    assert math.isclose(utils.dist_array(a, b, 2), math.dist(a[::2], b[::2]))


def test_sample_array_picks_only_weighted_index():
    rng = random.Random(7)
    for _ in range(20):
        assert utils.sample_array([0.0, 0.0, 3.0, 0.0], rng) == 2
    weights = [1.0, 2.0]
    utils.sample_array(weights, rng)
    assert weights == [1.0, 2.0]


def test_max_index():
    assert utils.max_index([]) == -1
    values = [1.0, 3.0, 3.0, 2.0]
    assert utils.max_index(values) == values.index(max(values))


def test_random_helpers_in_range_and_reproducible():
    rng = random.Random(3)
    for _ in range(100):
        assert 2 <= utils.rand_int(2, 5, rng) <= 5
        assert -1.0 <= utils.rand_uniform(-1.0, 1.0, rng) <= 1.0
        assert 0 <= utils.rand_size_t(rng) < 2**64
        assert math.isfinite(utils.rand_normal(rng))
    assert utils.rand_int(4, 4, rng) == 4
    assert utils.rand_normal(random.Random(11)) == utils.rand_normal(random.Random(11))


def test_shuffle_is_reproducible_permutation():
    items = list(range(20))
    utils.shuffle(items, random.Random(1))
    assert sorted(items) == list(range(20))
    again = list(range(20))
    utils.shuffle(again, random.Random(1))
    assert items == again


def test_sorta_shuffle_keeps_sections():
    items = list(range(12))
    utils.sorta_shuffle(items, 3, random.Random(5))
    assert sorted(items[0:4]) == [0, 1, 2, 3]
    assert sorted(items[4:8]) == [4, 5, 6, 7]
    assert sorted(items[8:12]) == [8, 9, 10, 11]


def test_one_hot_encode():
    rows = utils.one_hot_encode([2.0, 0.0, 1.7], 4)
    for value, row in zip([2.0, 0.0, 1.7], rows):
        assert sum(row) == 1.0
        assert row[int(value)] == 1.0


def test_path_helpers():
    assert utils.get_poster_class("data/posters/003_000123.jpg") == 3
    assert utils.get_file_name("a/b/c.jpg") == "c.jpg"
    assert utils.get_image_name("a/b/c.jpg") == "c"
    assert utils.get_second_last("a/b/c", "/") == "b"
    assert utils.get_second_last("a", "/") == "-1"


def test_path_helpers_need_jpg():
    with pytest.raises(ValueError):
        utils.get_poster_class("a/b/003_1.png")
    with pytest.raises(ValueError):
        utils.get_image_name("a/b/c.png")