# data_displayers/stats_view.py
import gi
from data_displayer import DataDisplayer
from config_model import populate_defaults_from_model
from stats_style import build_style, get_stats_config_model
from stats_geometry import resolve
from stats_renderer import ChartSpec, render
from stats_animator import ProgressAnimator
from cairo_painter import paint_plan

gi.require_version("Gtk", "4.0")
from gi.repository import Gtk, GLib

class StatsViewDisplayer(DataDisplayer):
    """
    Draws a data set as colored arcs around a ring with the overall
    percentage in the middle. Every new data set is revealed with a
    one-shot animation in one of three styles (rotation, sequential fill,
    center-out fill).
    """
    def __init__(self, config):
        self._chart = ChartSpec(0.0, ())
        self._progress = 0.0

        # --- Caching State ---
        self._geometry = None
        self._last_draw_width, self._last_draw_height = -1, -1

        super().__init__(config)
        populate_defaults_from_model(self.config, self.get_config_model())
        self.style = build_style(self.config)

        self._animator = ProgressAnimator(
            self._on_progress,
            duration_ms=self.style.animation_duration,
            schedule=GLib.timeout_add,
            cancel=GLib.source_remove,
        )
        self.widget.connect("unrealize", self._stop_animation)

    def _create_widget(self):
        self.drawing_area = Gtk.DrawingArea(hexpand=True, vexpand=True)
        self.drawing_area.set_draw_func(self.on_draw)
        return self.drawing_area

    @property
    def total_data(self):
        return self._chart.total

    @total_data.setter
    def total_data(self, value):
        self._chart = ChartSpec(float(value), self._chart.values)
        self.drawing_area.queue_draw()

    @property
    def data_list(self):
        return list(self._chart.values)

    @data_list.setter
    def data_list(self, values):
        self._chart = ChartSpec(self._chart.total, tuple(float(v) for v in values))
        self._animator.start()

    def set_data(self, total, values):
        """Replaces the whole data set and restarts the reveal animation."""
        self._chart = ChartSpec(float(total), tuple(float(v) for v in values))
        self._animator.start()

    def update_display(self, value, **kwargs):
        if not value: return
        self.set_data(value.get("total", self._chart.total), value.get("values", ()))

    @staticmethod
    def get_config_model():
        model = DataDisplayer.get_config_model()
        model.update(get_stats_config_model())
        return model

    @staticmethod
    def get_config_key_prefixes():
        return ["stats_"]

    def apply_styles(self):
        super().apply_styles()
        self.style = build_style(self.config)
        self._animator.duration_ms = self.style.animation_duration
        self._geometry = None
        self.drawing_area.queue_draw()

    def reset_state(self):
        """Rewinds the animation when the displayer is reconfigured."""
        self._animator.stop()
        self._progress = 0.0

    def _on_progress(self, progress):
        self._progress = progress
        self.drawing_area.queue_draw()

    def _stop_animation(self, widget=None):
        self._animator.stop()

    def on_draw(self, area, ctx, width_float, height_float):
        width, height = int(width_float), int(height_float)
        if width <= 0 or height <= 0: return

        if self._geometry is None or self._last_draw_width != width or self._last_draw_height != height:
            self._geometry = resolve(width, height, self.style.line_width)
            self._last_draw_width, self._last_draw_height = width, height

        plan = render(self._chart, self._geometry, self.style.animation_policy, self._progress,
                      self.style.colors, not_filled_color=self.style.not_filled_color,
                      text_color=self.style.text_color, font_size=self.style.font_size)
        paint_plan(ctx, plan, self.style, self._geometry)

    def close(self):
        self._animator.stop()
        super().close()
