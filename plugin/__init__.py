from .loader import OPTIONS_KEY, PLUGIN_NAME, FormatUrlTemplatePlugin, per_call_options, plugin_factory

__all__ = ["OPTIONS_KEY", "PLUGIN_NAME", "FormatUrlTemplatePlugin", "per_call_options", "plugin_factory"]
