import pytest

from ramaplot.core.services.color_mapper import ColorMapper, hsv_to_rgb


@pytest.fixture
def mapper():
    return ColorMapper()


class TestHsvToRgb:
    @pytest.mark.parametrize(
        "hue, expected",
        [
            (0.0, (255, 0, 0)),
            (60.0, (255, 255, 0)),
            (120.0, (0, 255, 0)),
            (180.0, (0, 255, 255)),
            (240.0, (0, 0, 255)),
            (300.0, (255, 0, 255)),
            (360.0, (255, 0, 0)),
        ],
    )
    def test_primary_hues(self, hue, expected):
        assert hsv_to_rgb(hue, 1.0, 1.0) == expected

    def test_zero_saturation_is_grey(self):
        assert hsv_to_rgb(200.0, 0.0, 0.5) == (128, 128, 128)

    def test_value_scales_channels(self):
        assert hsv_to_rgb(0.0, 1.0, 0.0) == (0, 0, 0)
        assert hsv_to_rgb(0.0, 0.5, 1.0) == (255, 128, 128)


class TestColorFor:
    def test_single_series_is_red(self, mapper):
        assert mapper.color_for(0, 1) == (255, 0, 0)

    @pytest.mark.parametrize("total", range(2, 40))
    def test_first_and_last_differ(self, mapper, total):
        assert mapper.color_for(0, total) != mapper.color_for(total - 1, total)

    @pytest.mark.parametrize("total", [1, 2, 3, 7, 13, 100])
    def test_channels_are_8_bit(self, mapper, total):
        for index in range(total):
            for channel in mapper.color_for(index, total):
                assert isinstance(channel, int)
                assert 0 <= channel <= 255

    def test_deterministic(self, mapper):
        assert mapper.palette(9) == ColorMapper().palette(9)

    def test_invalid_total(self, mapper):
        with pytest.raises(ValueError):
            mapper.color_for(0, 0)


class TestHue:
    def test_known_values(self):
        assert ColorMapper.hue_for(0, 4) == 0.0
        assert ColorMapper.hue_for(1, 10) == 26.0
        assert ColorMapper.hue_for(2, 10) == 92.0
        assert ColorMapper.hue_for(1, 2) == 170.0

    def test_only_jump_is_at_the_skipped_band(self):
        total = 520
        norm = 260.0 / total
        hues = [ColorMapper.hue_for(i, total) for i in range(total)]
        jumps = []
        for i in range(1, total):
            step = hues[i] - hues[i - 1]
            if step != pytest.approx(norm):
                jumps.append(i)
                assert step == pytest.approx(norm + 40.0)
        assert len(jumps) == 1
        index = jumps[0]
        assert index * norm + 20.0 >= 55.0 > (index - 1) * norm + 20.0

    def test_hue_never_lands_in_skipped_band(self):
        for total in range(1, 60):
            for index in range(total):
                hue = ColorMapper.hue_for(index, total)
                assert not 35.0 <= hue < 75.0
                assert 0.0 <= hue < 300.0
