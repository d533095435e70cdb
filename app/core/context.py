import contextvars
from typing import Optional

# 요청 단위 Trace ID (TraceIDMiddleware가 설정하고 TraceIdFilter가 로그에 주입)
trace_id_context: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar("trace_id", default=None)


def get_trace_id() -> Optional[str]:
    return trace_id_context.get()


def set_trace_id(trace_id: Optional[str]) -> None:
    trace_id_context.set(trace_id)
