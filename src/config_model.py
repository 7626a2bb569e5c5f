# config_model.py

class ConfigOption:
    """
    A data class to define a single configuration option.
    """
    def __init__(self, key, option_type, label, default,
                 min_val=None, max_val=None, step=None, digits=0,
                 options_dict=None, tooltip=None):
        self.key = key
        # Valid types: "string", "bool", "color", "spinner", "dropdown"
        self.type = option_type
        self.label = label
        self.default = default
        self.min_val = min_val
        self.max_val = max_val
        self.step = step
        self.digits = digits
        self.options_dict = options_dict or {}
        self.tooltip = tooltip

def populate_defaults_from_model(config, model):
    """
    Helper function to populate a configuration dictionary with default values
    from a given configuration model.
    """
    for section in model.values():
        for option in section:
            config.setdefault(option.key, str(option.default))

def model_keys(model):
    return {opt.key for section in model.values() for opt in section}
