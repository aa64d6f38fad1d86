# koine\shared\observability.py
from opentelemetry import trace

def get_tracer(name: str):
    """
    Utility to get a tracer for manual instrumentation in Use Cases.
    Without a configured TracerProvider this returns a no-op tracer, so
    spans cost nothing unless the host application installs an SDK.

    Usage:
        tracer = get_tracer(__name__)
        with tracer.start_as_current_span("my_custom_logic"):
            ...
    """
    return trace.get_tracer(name)
