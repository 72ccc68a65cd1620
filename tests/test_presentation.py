from types import SimpleNamespace

from timeorb.colors import Color, Glow
from timeorb.engine import OrbEngine
from timeorb.palette import DEFAULT_PALETTES
from timeorb.periods import Period
from timeorb.presentation import (box_shadow, describe, flatten_glow, gradient_stops, radial_gradient,
                                  sample_gradient, style_for)

MIDDAY = DEFAULT_PALETTES[Period.MIDDAY]

def test_gradient_stops():
    stops = gradient_stops(MIDDAY)
    assert [o for o, _ in stops] == [0.0, 0.4, 0.8, 1.0]
    assert stops[0][1] == MIDDAY.primary
    assert stops[3][1] == Color(255, 71, 27)  # halfway tertiary -> secondary

def test_radial_gradient_css():
    assert radial_gradient(MIDDAY) == (
        'radial-gradient(circle at 35% 35%, #FF4500 0%, #FF2200 40%, #FF6B35 80%, #FF471B 100%)')

def test_box_shadow_css():
    assert box_shadow(MIDDAY) == '0 0 120px 60px rgba(255, 69, 0, 0.4)'
    assert box_shadow(MIDDAY, 10, 5) == '0 0 10px 5px rgba(255, 69, 0, 0.4)'

def test_style_for_state():
    state = OrbEngine().compute(6, 45)
    st = style_for(state)
    assert st.is_transitioning
    assert st.glow == DEFAULT_PALETTES[Period.MORNING].glow
    assert st.gradient.startswith('radial-gradient(circle at 35% 35%, #FF8B46 0%')

def test_style_for_uses_render_settings():
    render = SimpleNamespace(center_x_pct=50, center_y_pct=40, glow_blur_px=30, glow_spread_px=10)
    st = style_for(OrbEngine().compute(12, 0), render)
    assert 'circle at 50% 40%' in st.gradient
    assert st.box_shadow.startswith('0 0 30px 10px ')
    assert not st.is_transitioning

def test_sample_gradient():
    stops = gradient_stops(MIDDAY)
    assert sample_gradient(stops, 0) == MIDDAY.primary
    assert sample_gradient(stops, 0.4) == MIDDAY.secondary
    assert sample_gradient(stops, 1.0) == stops[-1][1]
    assert sample_gradient(stops, 2.0) == stops[-1][1]
    mid = sample_gradient(stops, 0.2)
    assert mid == Color(255, 52, 0)

def test_flatten_glow():
    bg = Color(0, 0, 0)
    g = Glow(Color(200, 100, 50), 0.5)
    assert flatten_glow(g, bg, 0) == bg
    assert flatten_glow(g, bg, 1) == Color(100, 50, 25)
    assert flatten_glow(g, bg, 10) == g.color

def test_describe_at_rest_shows_period_span():
    assert describe(OrbEngine().compute(12, 37)) == ('Midday', '11:00-14:00')
    assert describe(OrbEngine().compute(0, 30)) == ('Night', '22:00-01:00')
    assert describe(OrbEngine().compute(2, 0)) == ('Late night', '01:00-05:00')

def test_describe_while_blending():
    assert describe(OrbEngine().compute(6, 45)) == ('Dawn', 'shifting to morning · 50%')
