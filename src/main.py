# main.py
import os
import sys
import signal

sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

import gi
gi.require_version("Gtk", "4.0")
from gi.repository import Gtk, Gio, GLib

from config_manager import ConfigManager, default_config_file
from stats_style import ConfigurationError, build_style
from data_displayers.stats_view import StatsViewDisplayer

APP_VERSION = "1.0.0"

DEFAULT_TOTAL = 1000.0
DEFAULT_VALUES = [250.0, 250.0, 250.0, 250.0]

def command_line_overrides(options):
    """Maps command-line options onto the view config keys they override."""
    overrides = {}
    if 'animation-type' in options:
        overrides["stats_animation_type"] = options['animation-type']
    return overrides

def parse_values(text):
    """Parses a comma separated list of numbers, e.g. "250,250,500"."""
    return [float(item) for item in text.split(",") if item.strip()]

class MainWindow(Gtk.ApplicationWindow):
    def __init__(self, app, config_manager, displayer, chart_data, transient_keys=()):
        super().__init__(title="Stats", application=app)
        self.config_manager = config_manager
        self.displayer = displayer
        # Command-line overrides apply to this run only and are never saved
        self.transient_keys = set(transient_keys)

        window_config = self.config_manager.get_window_config()
        try:
            width = int(window_config.get("width", 400))
            height = int(window_config.get("height", 400))
        except ValueError:
            print(f"Warning: Invalid window size in config: {window_config}. Using defaults.")
            width, height = 400, 400
        self.set_default_size(width, height)
        self.set_child(self.displayer.get_widget())

        GLib.idle_add(self._show_initial_data, chart_data)

    def _show_initial_data(self, chart_data):
        total, values = chart_data
        self.displayer.set_data(total, values)
        return GLib.SOURCE_REMOVE

    def do_close_request(self):
        width, height = self.get_default_size()
        self.config_manager.save_window_config({"width": width, "height": height})
        self.config_manager.save_chart_data(self.displayer.total_data, self.displayer.data_list)
        style_keys = self.displayer.get_all_style_keys()
        self.config_manager.update_view_config(
            {k: v for k, v in self.displayer.config.items() if k in style_keys},
            skip_keys=self.transient_keys)
        self.config_manager.save(immediate=True)
        self.displayer.close()
        return False

class StatsRingApp(Gtk.Application):
    def __init__(self, **kwargs):
        super().__init__(application_id="com.example.stats-ring",
                         flags=Gio.ApplicationFlags.HANDLES_COMMAND_LINE | Gio.ApplicationFlags.NON_UNIQUE,
                         **kwargs)
        self.window = None
        self.config_manager = None
        self.command_line_options = {}

        self.add_main_option(
            "config", 0, GLib.OptionFlags.NONE, GLib.OptionArg.STRING,
            "Load a specific config file", "FILEPATH")
        self.add_main_option(
            "animation-type", ord("a"), GLib.OptionFlags.NONE, GLib.OptionArg.STRING,
            "Reveal animation: rotation, sequential or bidirectional", "TYPE")
        self.add_main_option(
            "total", ord("t"), GLib.OptionFlags.NONE, GLib.OptionArg.DOUBLE,
            "Total the values are measured against", "NUMBER")
        self.add_main_option(
            "values", 0, GLib.OptionFlags.NONE, GLib.OptionArg.STRING,
            "Comma separated values to display", "LIST")
        self.add_main_option(
            "version", ord("v"), GLib.OptionFlags.NONE, GLib.OptionArg.NONE,
            "Show application version and exit", None)

    def do_command_line(self, command_line):
        """Handles command-line argument processing."""
        options = command_line.get_options_dict()
        options = options.end().unpack()

        if 'version' in options:
            print(f"StatsRing {APP_VERSION}")
            return 0

        if 'config' in options:
            config_path = options['config']
            if not os.path.isfile(config_path):
                print(f"Error: Config file not found: {config_path}. Exiting.")
                return 1
            self.config_manager = ConfigManager(config_path)
        else:
            self.config_manager = ConfigManager(default_config_file(GLib.get_user_config_dir()))

        if 'values' in options:
            try:
                parse_values(options['values'])
            except ValueError:
                print(f"Error: --values expects comma separated numbers, got '{options['values']}'. Exiting.")
                return 1

        view_config = dict(self.config_manager.get_view_config(), **command_line_overrides(options))
        try:
            build_style(view_config)
        except ConfigurationError as e:
            print(f"Error: Invalid chart configuration: {e}. Exiting.")
            return 1

        self.command_line_options = options
        self.activate()
        return 0

    def _chart_data(self, options):
        total, values = self.config_manager.get_chart_data()
        if not values:
            total, values = DEFAULT_TOTAL, list(DEFAULT_VALUES)
        if 'total' in options:
            total = options['total']
        if 'values' in options:
            values = parse_values(options['values'])
        return total, values

    def do_activate(self):
        if self.config_manager is None:
            self.config_manager = ConfigManager(default_config_file(GLib.get_user_config_dir()))
        options = self.command_line_options

        if not self.window or not self.window.is_visible():
            overrides = command_line_overrides(options)
            displayer = StatsViewDisplayer(dict(self.config_manager.get_view_config(), **overrides))
            self.window = MainWindow(self, self.config_manager, displayer, self._chart_data(options),
                                     transient_keys=overrides)
        self.window.present()
        self.command_line_options = {}

    def do_startup(self):
        Gtk.Application.do_startup(self)

        for sig in [signal.SIGINT, signal.SIGTERM]:
            GLib.unix_signal_add(GLib.PRIORITY_DEFAULT, sig, self.on_signal, sig)

        action = Gio.SimpleAction.new("quit", None)
        action.connect("activate", self.on_quit)
        self.add_action(action)
        self.set_accels_for_action("app.quit", ["<Control>q"])

    def on_quit(self, *args):
        if self.window and self.window.is_visible():
            self.window.close()
        self.quit()

    def on_signal(self, signum):
        print(f"Caught signal {signum}, attempting graceful shutdown.")
        self.on_quit()
        return True

def run():
    app = StatsRingApp()
    return app.run(sys.argv)

if __name__ == "__main__":
    sys.exit(run())
