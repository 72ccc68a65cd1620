import datetime as dt

from orbui.orb_monitor import OrbMonitor
from timeorb.engine import OrbEngine
from timeorb.periods import Period
from timeorb.presentation import describe

class FakeApp:
    """Stands in for tk: records after() calls instead of running them."""
    def __init__(self):
        self.jobs = []; self.cancelled = []
    def after(self, ms, fn):
        self.jobs.append((ms, fn)); return f'after#{len(self.jobs)}'
    def after_cancel(self, job):
        self.cancelled.append(job)

class Clock:
    def __init__(self, when):
        self.now = when
    def __call__(self):
        return self.now

def build(hour=12, minute=0, **kw):
    clock = Clock(dt.datetime(2024, 5, 1, hour, minute))
    return OrbMonitor(OrbEngine(), clock=clock, **kw), clock

def test_start_samples_immediately_and_reschedules():
    mon, _ = build()
    app = FakeApp(); seen = []
    mon.add_listener(seen.append)
    mon.start_monitoring(app)
    assert [s.period for s in seen] == [Period.MIDDAY]
    assert mon.current is seen[0]
    assert app.jobs[-1][0] == 60000
    app.jobs[-1][1]()  # fire the next tick
    assert len(app.jobs) == 2

def test_notifies_only_on_change():
    mon, clock = build(6, 0)
    app = FakeApp(); seen = []
    mon.add_listener(seen.append)
    mon.start_monitoring(app)
    clock.now = dt.datetime(2024, 5, 1, 6, 10)
    app.jobs[-1][1]()
    assert len(seen) == 1  # still resting in dawn
    clock.now = dt.datetime(2024, 5, 1, 6, 45)
    app.jobs[-1][1]()
    assert len(seen) == 2
    assert seen[-1].is_transitioning
    clock.now = dt.datetime(2024, 5, 1, 7, 0)
    app.jobs[-1][1]()
    assert seen[-1].period is Period.MORNING and not seen[-1].is_transitioning

def test_late_listener_gets_current_state():
    mon, _ = build()
    mon.start_monitoring(FakeApp())
    seen = []
    mon.add_listener(seen.append)
    assert seen == [mon.current]
    mon.add_listener(seen.append)  # duplicate registration ignored
    assert len(seen) == 1

def test_listener_errors_do_not_stop_others():
    mon, clock = build()
    app = FakeApp(); seen = []
    def boom(state): raise RuntimeError('render failed')
    mon.add_listener(boom); mon.add_listener(seen.append)
    mon.start_monitoring(app)
    assert len(seen) == 1
    clock.now = dt.datetime(2024, 5, 1, 13, 45)
    app.jobs[-1][1]()
    assert len(seen) == 2
    assert len(app.jobs) == 2

def test_remove_listener():
    mon, clock = build()
    seen = []
    mon.add_listener(seen.append)
    mon.remove_listener(seen.append)
    mon.remove_listener(seen.append)
    mon.refresh()
    assert seen == []

def test_stop_cancels_pending_tick():
    mon, _ = build()
    app = FakeApp()
    mon.start_monitoring(app)
    mon.stop()
    assert app.cancelled == ['after#1']
    mon.refresh()  # still usable as a plain function
    assert len(app.jobs) == 1

def test_refresh_without_app_and_period_floor():
    mon, _ = build(0, 30, period_ms=10)
    assert mon._period_ms == 250
    s = mon.refresh()
    assert s.period is Period.NIGHT
    assert mon.current is s

def test_rendered_detail_is_current_at_rest_and_while_blending():
    mon, clock = build(12, 0)
    app = FakeApp(); labels = []
    mon.add_listener(lambda s: labels.append(describe(s)))
    mon.start_monitoring(app)
    clock.now = dt.datetime(2024, 5, 1, 12, 37)
    app.jobs[-1][1]()
    assert describe(mon.current) == ('Midday', '11:00-14:00')
    assert labels[-1] == describe(mon.current)
    clock.now = dt.datetime(2024, 5, 1, 13, 40)
    app.jobs[-1][1]()
    assert labels[-1] == ('Midday', 'shifting to afternoon · 33%')
    clock.now = dt.datetime(2024, 5, 1, 13, 45)
    app.jobs[-1][1]()
    assert labels[-1] == ('Midday', 'shifting to afternoon · 50%')
