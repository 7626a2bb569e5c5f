import configparser
import os
import threading
import io

CONFIG_FILE_NAME = "stats_view.ini"

VIEW_SECTION = "stats_view"
DATA_SECTION = "data"
WINDOW_SECTION = "window"


def default_config_file(config_home=None):
    if config_home:
        return os.path.join(config_home, "StatsRing", CONFIG_FILE_NAME)
    return os.path.join(os.path.expanduser("~/.config/StatsRing"), CONFIG_FILE_NAME)


def _format_number(value):
    value = float(value)
    return str(int(value)) if value.is_integer() else repr(value)


class ConfigManager:
    def __init__(self, config_file):
        self.config_file = config_file
        self.config = configparser.ConfigParser(interpolation=None)
        self.config.optionxform = str
        self.load()

        # --- Debounce State ---
        self._save_timer = None
        self._save_lock = threading.Lock()

    def load(self, filepath=None):
        load_path = filepath if filepath else self.config_file
        current_config_backup = self.config
        self.config = configparser.ConfigParser(interpolation=None)
        self.config.optionxform = str

        if os.path.exists(load_path):
            try:
                self.config.read(load_path, encoding='utf-8')
                print(f"Configuration loaded from {load_path}")
                return True
            except configparser.Error as e:
                print(f"Error reading config file {load_path}: {e}. Restoring previous config.")
                self.config = current_config_backup
                return False
        else:
            if filepath:
                print(f"Config file {load_path} not found.")
                self.config = current_config_backup
                return False
            print(f"Config file {load_path} not found. A new default configuration will be created on save.")
            return True

    def save(self, filepath=None, immediate=False):
        """
        Saves configuration safely. Background saves are debounced by one
        second; explicit paths and immediate saves are written synchronously.
        """
        config_data = io.StringIO()
        self.config.write(config_data)
        serialized_data = config_data.getvalue()
        config_data.close()

        target_path = filepath if filepath else self.config_file

        if filepath or immediate:
            self.cancel_pending_save()
            return self._write_to_disk(target_path, serialized_data)

        with self._save_lock:
            if self._save_timer:
                self._save_timer.cancel()
            self._save_timer = threading.Timer(1.0, self._write_to_disk, args=[target_path, serialized_data])
            self._save_timer.daemon = True
            self._save_timer.start()
        return True

    def cancel_pending_save(self):
        with self._save_lock:
            if self._save_timer:
                self._save_timer.cancel()
                self._save_timer = None

    def _write_to_disk(self, save_path, data_string):
        """Helper to perform the actual synchronous write operation using pre-serialized data."""
        try:
            os.makedirs(os.path.dirname(os.path.abspath(save_path)), exist_ok=True)
            with open(save_path, "w", encoding='utf-8') as f:
                f.write(data_string)
            print(f"Configuration saved to {save_path}")
            return True
        except IOError as e:
            print(f"Error writing config file {save_path}: {e}")
            return False

    def _get_section(self, section):
        if self.config.has_section(section):
            return dict(self.config.items(section))
        return {}

    def _set_section(self, section, values):
        if not self.config.has_section(section):
            self.config.add_section(section)
        for key, value in values.items():
            self.config.set(section, str(key), str(value))

    def get_view_config(self):
        return self._get_section(VIEW_SECTION)

    def update_view_config(self, view_config_dict, skip_keys=()):
        """Stores displayer options, leaving `skip_keys` (one-off overrides) at their saved values."""
        self._set_section(VIEW_SECTION, {k: v for k, v in view_config_dict.items() if k not in skip_keys})

    def get_chart_data(self):
        """Returns (total, values) from the [data] section, skipping entries that are not numbers."""
        data = self._get_section(DATA_SECTION)

        total = 0.0
        try:
            total = float(data.get("total", 0))
        except ValueError:
            print(f"Warning: Invalid total '{data.get('total')}' in [{DATA_SECTION}]. Using 0.")

        values = []
        for item in data.get("values", "").split(","):
            item = item.strip()
            if not item:
                continue
            try:
                values.append(float(item))
            except ValueError:
                print(f"Warning: Skipping invalid value '{item}' in [{DATA_SECTION}].")
        return total, values

    def save_chart_data(self, total, values):
        self._set_section(DATA_SECTION, {
            "total": _format_number(total),
            "values": ", ".join(_format_number(v) for v in values),
        })

    def get_window_config(self):
        return self._get_section(WINDOW_SECTION)

    def save_window_config(self, window_config_dict):
        self._set_section(WINDOW_SECTION, window_config_dict)
