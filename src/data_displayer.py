# /data_displayer.py
from abc import ABC, abstractmethod

from config_model import model_keys

class DataDisplayer(ABC):
    def __init__(self, config):
        self.config = config
        self.widget = self._create_widget()

    @abstractmethod
    def _create_widget(self):
        pass

    def get_widget(self):
        return self.widget
    def update_display(self, value, **kwargs):
        pass
    @staticmethod
    def get_config_model():
        return {}
    def apply_styles(self):
        pass

    @staticmethod
    def get_config_key_prefixes():
        """
        Returns a list of unique prefixes used for dynamically generated
        config keys, e.g., ['stats_']. The config manager uses this to find
        all relevant styles to save.
        """
        return []

    def get_all_style_keys(self):
        """
        Returns a set of all configuration keys that are considered part of
        this displayer's style. By default, it derives keys from the config model.
        """
        return model_keys(self.get_config_model())

    def reset_state(self):
        """Optional method to reset any internal state when config changes."""
        pass

    def close(self):
        """Releases timers and other resources held by the displayer."""
        pass
