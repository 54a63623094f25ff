"""
Тесты для GenerationSession

Проверяет:
1. Генерацию без целей (центр документа, пользовательские радиус и цвет)
2. Генерацию по целям (центр bounding box, радиус = половина ширины)
3. Случайный базовый цвет для целей без обводки
4. Порядок потребления RandomSource
5. Изоляцию запросов между целями
6. Прерывание запуска при UnsupportedColorKind
7. Валидацию SessionSettings
8. Логирование предупреждений
"""

import logging

import pytest

from src.core.domain import (
    BLACK,
    BlendMode,
    BoundingBox,
    CMYKStroke,
    DocumentCanvas,
    FormationGroup,
    GenerationInput,
    GrayStroke,
    NoStroke,
    Point2D,
    RadiusRange,
    RGBColor,
    RGBStroke,
    SpotStroke,
    TargetShape,
    VariationStrategyKind,
)
from src.core.errors import InvalidParameter, UnsupportedColorKind
from src.starburst import (
    MAX_RAY_COUNT,
    GenerationSession,
    SequenceRandomSource,
    SessionSettings,
    SystemRandomSource,
    random_rgb,
    targets_missing_stroke,
)


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def canvas() -> DocumentCanvas:
    return DocumentCanvas(width=800.0, height=600.0)


@pytest.fixture
def stroked_target() -> TargetShape:
    """Фигура 100×40 с левым верхним углом (10, -20) и RGB обводкой"""
    return TargetShape(
        bounds=BoundingBox(x=10.0, y=-20.0, width=100.0, height=40.0),
        stroke=RGBStroke(red=10, green=20, blue=30),
    )


@pytest.fixture
def bare_target() -> TargetShape:
    """Фигура без обводки"""
    return TargetShape(bounds=BoundingBox(x=200.0, y=-100.0, width=60.0, height=60.0))


def white_blend_settings(**overrides) -> SessionSettings:
    params = dict(ray_count=1, variation=VariationStrategyKind.WHITE_BLEND)
    params.update(overrides)
    return SessionSettings(**params)


# =============================================================================
# НАСТРОЙКИ
# =============================================================================


class TestSessionSettings:
    """Тесты SessionSettings"""

    def test_defaults(self) -> None:
        settings = SessionSettings()
        assert settings.ray_count == 50
        assert settings.stroke_width == 1.0
        assert settings.radius_range == RadiusRange(0.0, 200.0)
        assert settings.base_color == BLACK
        assert settings.opacity == 20.0
        assert settings.blend_mode == BlendMode.NORMAL
        assert settings.variation == VariationStrategyKind.HUE_RANDOMIZED_LIGHTNESS
        assert settings.target_radius_min == 0.0
        settings.validate()

    def test_ray_count_limit(self) -> None:
        SessionSettings(ray_count=MAX_RAY_COUNT).validate()
        with pytest.raises(InvalidParameter, match="ray_count"):
            SessionSettings(ray_count=MAX_RAY_COUNT + 1).validate()

    @pytest.mark.parametrize("width", [0.5, 31.0])
    def test_stroke_width_limits(self, width) -> None:
        with pytest.raises(InvalidParameter, match="stroke_width"):
            SessionSettings(stroke_width=width).validate()

    def test_opacity_limits(self) -> None:
        with pytest.raises(InvalidParameter, match="opacity"):
            SessionSettings(opacity=101.0).validate()

    def test_inverted_radius_range(self) -> None:
        with pytest.raises(InvalidParameter, match="radius_range.min"):
            SessionSettings(radius_range=RadiusRange(100.0, 50.0)).validate()

    def test_session_rejects_invalid_settings(self) -> None:
        with pytest.raises(InvalidParameter):
            GenerationSession(SessionSettings(ray_count=-1))


# =============================================================================
# БЕЗ ЦЕЛЕЙ
# =============================================================================


class TestCanvasGeneration:
    """Генерация без выбранных фигур"""

    def test_single_group_at_canvas_center(self, canvas) -> None:
        settings = SessionSettings(ray_count=30, radius_range=RadiusRange(20.0, 150.0))
        groups = GenerationSession(settings).run(canvas, [], SystemRandomSource(seed=1))

        assert len(groups) == 1
        index, rays = groups[0]
        assert index == 0
        assert len(rays) == 30
        for ray in rays:
            assert ray.start == Point2D(400.0, -300.0)
            assert 20.0 - 1e-9 <= ray.length <= 150.0 + 1e-9

    def test_uses_user_base_color(self, canvas) -> None:
        base = RGBColor(red=40, green=80, blue=120)
        settings = white_blend_settings(base_color=base)
        source = SequenceRandomSource([0.0, 0.0, 1.0])
        (group,) = GenerationSession(settings).run(canvas, [], source)
        assert group.rays[0].color == base

    def test_radius_clamped_to_canvas(self, caplog) -> None:
        """Радиус больше половины ширины документа сжимается"""
        small = DocumentCanvas(width=100.0, height=100.0)
        session = GenerationSession(SessionSettings(radius_range=RadiusRange(0.0, 200.0)))

        with caplog.at_level(logging.WARNING, logger="src.starburst.session"):
            request = session.request_for_canvas(small)

        assert request.radius_range == RadiusRange(0.0, 50.0)
        assert "exceeds canvas limit" in caplog.text

    def test_radius_within_canvas_unchanged(self, canvas) -> None:
        session = GenerationSession(SessionSettings(radius_range=RadiusRange(5.0, 120.0)))
        assert session.request_for_canvas(canvas).radius_range == RadiusRange(5.0, 120.0)


# =============================================================================
# ПО ЦЕЛЯМ
# =============================================================================


class TestTargetGeneration:
    """Генерация по выбранным фигурам"""

    def test_center_and_radius_from_bounds(self, canvas, stroked_target) -> None:
        session = GenerationSession(white_blend_settings())
        source = SequenceRandomSource([0.0, 1.0, 1.0])
        (group,) = session.run(canvas, [stroked_target], source)

        ray = group.rays[0]
        assert ray.start == Point2D(60.0, -40.0)
        assert ray.end.x == pytest.approx(110.0)
        assert ray.end.y == pytest.approx(-40.0)
        assert ray.color == RGBColor(red=10, green=20, blue=30)

    def test_radius_range_for_target(self, stroked_target) -> None:
        session = GenerationSession(SessionSettings(radius_range=RadiusRange(30.0, 90.0)))
        request = session.request_for_target(stroked_target, SystemRandomSource(seed=0))
        # Пользовательский минимум не применяется к целям
        assert request.radius_range == RadiusRange(0.0, 50.0)

    def test_configurable_target_radius_min(self, stroked_target) -> None:
        session = GenerationSession(SessionSettings(target_radius_min=10.0))
        request = session.request_for_target(stroked_target, SystemRandomSource(seed=0))
        assert request.radius_range == RadiusRange(10.0, 50.0)

    def test_target_radius_min_capped_by_half_width(self, stroked_target) -> None:
        session = GenerationSession(SessionSettings(target_radius_min=80.0))
        request = session.request_for_target(stroked_target, SystemRandomSource(seed=0))
        assert request.radius_range == RadiusRange(50.0, 50.0)

    def test_cmyk_stroke_converted(self, canvas) -> None:
        target = TargetShape(
            bounds=BoundingBox(x=0.0, y=0.0, width=10.0, height=10.0),
            stroke=CMYKStroke(cyan=0, magenta=100, yellow=100, black=0),
        )
        session = GenerationSession(white_blend_settings())
        (group,) = session.run(canvas, [target], SequenceRandomSource([0.0, 0.0, 1.0]))
        assert group.rays[0].color.as_tuple() == (255, 0, 0)

    def test_one_group_per_target_in_order(self, canvas, stroked_target, bare_target) -> None:
        session = GenerationSession(SessionSettings(ray_count=7))
        groups = session.run(canvas, [stroked_target, bare_target], SystemRandomSource(seed=3))

        assert [g.target_index for g in groups] == [0, 1]
        assert all(len(g.rays) == 7 for g in groups)
        assert groups[0].rays[0].start == stroked_target.bounds.center
        assert groups[1].rays[0].start == bare_target.bounds.center

    def test_group_names(self, canvas, stroked_target, bare_target) -> None:
        groups = GenerationSession(SessionSettings(ray_count=1)).run(
            canvas, [stroked_target, bare_target], SystemRandomSource(seed=3)
        )
        assert groups[1].layer_name == "Ray layer - 2"
        assert groups[1].group_name == "Ray formation - 2"

    def test_requests_isolated_between_targets(self, stroked_target) -> None:
        """Цвет и радиус одной цели не влияют на другую"""
        gray_target = TargetShape(
            bounds=BoundingBox(x=0.0, y=0.0, width=400.0, height=10.0),
            stroke=GrayStroke(gray=100),
        )
        session = GenerationSession()
        requests = session.build_requests(
            DocumentCanvas(width=800.0, height=600.0),
            [gray_target, stroked_target],
            SystemRandomSource(seed=0),
        )

        assert requests[0].base_color.as_tuple() == (0, 0, 0)
        assert requests[0].radius_range.max == 200.0
        assert requests[1].base_color.as_tuple() == (10, 20, 30)
        assert requests[1].radius_range.max == 50.0
        assert session.settings == SessionSettings()


# =============================================================================
# ЦЕЛИ БЕЗ ОБВОДКИ
# =============================================================================


class TestMissingStroke:
    """Цели без обводки получают случайный цвет"""

    def test_random_rgb_from_draws(self) -> None:
        source = SequenceRandomSource([0.0, 0.5, 0.999999])
        assert random_rgb(source).as_tuple() == (0, 128, 255)

    def test_random_rgb_full_draw_capped(self) -> None:
        assert random_rgb(SequenceRandomSource([1.0, 1.0, 1.0])).as_tuple() == (255, 255, 255)

    def test_bare_target_gets_random_color(self, canvas, bare_target) -> None:
        session = GenerationSession(white_blend_settings())
        source = SequenceRandomSource([0.0, 0.5, 1.0, 0.0, 0.0, 1.0])
        (group,) = session.run(canvas, [bare_target], source)
        assert group.rays[0].color.as_tuple() == (0, 128, 255)

    def test_draw_order_colors_then_rays(self, canvas, bare_target, stroked_target) -> None:
        """3 draw на цвет цели без обводки, затем лучи цель за целью"""
        session = GenerationSession(white_blend_settings())
        source = SequenceRandomSource(
            [
                0.2, 0.4, 0.6,  # случайный цвет bare_target
                0.0, 0.0, 1.0,  # луч bare_target
                0.0, 0.0, 1.0,  # луч stroked_target
            ]
        )
        groups = session.run(canvas, [bare_target, stroked_target], source)

        assert source.consumed == 9
        assert groups[0].rays[0].color.as_tuple() == (51, 102, 153)
        assert groups[1].rays[0].color.as_tuple() == (10, 20, 30)

    def test_targets_missing_stroke(self, stroked_target, bare_target) -> None:
        assert targets_missing_stroke([stroked_target, bare_target, stroked_target]) == [1]

    def test_warning_logged(self, canvas, bare_target, caplog) -> None:
        session = GenerationSession(SessionSettings(ray_count=1))
        with caplog.at_level(logging.WARNING, logger="src.starburst.session"):
            session.run(canvas, [bare_target], SystemRandomSource(seed=0))
        assert "lack stroke colors" in caplog.text


# =============================================================================
# ОШИБКИ
# =============================================================================


class TestUnsupportedColor:
    """UnsupportedColorKind прерывает запуск до генерации лучей"""

    def test_unsupported_spot_aborts_run(self, canvas, stroked_target) -> None:
        bad = TargetShape(
            bounds=BoundingBox(x=0.0, y=0.0, width=10.0, height=10.0),
            stroke=SpotStroke(name="Gray Spot", color=GrayStroke(gray=20)),
        )
        session = GenerationSession(SessionSettings(ray_count=5))
        source = SequenceRandomSource([0.5] * 100)

        with pytest.raises(UnsupportedColorKind):
            session.run(canvas, [stroked_target, bad], source)

        # Лучи первой цели не генерировались
        assert source.consumed == 0


# =============================================================================
# GENERATION INPUT
# =============================================================================


class TestRunInput:
    """Запуск по распарсенному снимку документа"""

    def test_run_input_from_payload(self) -> None:
        payload = {
            "canvas": {"width": 500, "height": 300},
            "targets": [
                {
                    "bounds": {"x": 0, "y": 0, "width": 50, "height": 50},
                    "stroke": {"kind": "Gray", "gray": 0},
                },
                {"bounds": {"x": 100, "y": -50, "width": 20, "height": 10}},
            ],
        }
        generation_input = GenerationInput.model_validate(payload)
        assert isinstance(generation_input.targets[1].stroke, NoStroke)

        groups = GenerationSession(SessionSettings(ray_count=4)).run_input(
            generation_input, SystemRandomSource(seed=8)
        )
        assert len(groups) == 2
        assert all(isinstance(g, FormationGroup) for g in groups)
        assert groups[0].rays[0].start == Point2D(25.0, -25.0)

    def test_run_input_without_targets(self) -> None:
        generation_input = GenerationInput.model_validate({"canvas": {"width": 200, "height": 100}})
        (group,) = GenerationSession(SessionSettings(ray_count=2)).run_input(
            generation_input, SystemRandomSource(seed=8)
        )
        assert group.target_index == 0
        assert group.rays[0].start == Point2D(100.0, -50.0)
