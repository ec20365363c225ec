"""Sink registry: maps sink_type → lazy-import class path."""

AVAILABLE_SINKS: dict[str, str] = {
    "better_stack": "herald.integrations.adapters.better_stack.BetterStackSink",
    "null": "herald.integrations.adapters.null.NullSink",
}


def import_sink(dotted_path: str):
    """Import a sink class from its dotted module path."""
    import importlib

    module_path, class_name = dotted_path.rsplit(".", 1)
    module = importlib.import_module(module_path)
    return getattr(module, class_name)
