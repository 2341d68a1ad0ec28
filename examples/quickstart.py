"""Quickstart example for timefmt.

This example demonstrates rendering, recovering and compiled programs.

Note: Every call returns (result, errors). Examples print the errors tuple
where failure is the point of the example.
"""

import io
from datetime import datetime, timedelta, timezone

from timefmt import (
    DateTime,
    UtcOffset,
    compile_format,
    compile_parse,
    parse_program,
    recover,
    recover_strict,
    render,
    render_into,
    render_program,
)
from timefmt.diagnostics import DiagnosticFormatter

moment = DateTime.of(2022, 3, 6, 12, 34, 56, 987_654_320)

# Example 1: Rendering
print("=" * 50)
print("Example 1: Rendering")
print("=" * 50)

result, _ = render("%c", moment)
print(result)
# Output: Sun Mar  6 12:34:56 2022

result, _ = render("%FT%T.%f%z", moment, offset=UtcOffset(9))
print(result)
# Output: 2022-03-06T12:34:56.98765432+0900

aware = datetime(2022, 3, 6, 12, 34, 56, tzinfo=timezone(timedelta(hours=1), "CET"))
result, _ = render("%A %e %B %Y, %l:%M %P %Z", aware)
print(result)
# Output: Sunday  6 March 2022, 12:34 pm CET

# Example 2: Writing into a stream
print("\n" + "=" * 50)
print("Example 2: Rendering Into A Stream")
print("=" * 50)

stream = io.StringIO()
count, _ = render_into("%j/%U/%V", moment, stream)
print(stream.getvalue(), count)
# Output: 065/10/09 9

# Example 3: Recovering
print("\n" + "=" * 50)
print("Example 3: Recovering")
print("=" * 50)

(value, zone), _ = recover("%F %T %z", "2022-03-06 12:34:56 -05:30")
print(value.date, value.time.hour, zone)

(value, _), _ = recover("%I %p", "12 am")
print(value.time.hour)
# Output: 0

# Default mode ignores trailing input; strict mode reports it.
result, errors = recover_strict("%F", "2022-03-06T12:34:56Z")
print(result)
print(DiagnosticFormatter().format(errors[0].diagnostic))
# Output:
# None
# error[UNCONVERTED_DATA_REMAINS]: Unconverted data remains: 'T12:34:56Z'
#   --> characters 10..20
#   = help: Extend the format to cover the trailing text or use non-strict mode

# Example 4: Compiled programs
print("\n" + "=" * 50)
print("Example 4: Compiled Programs")
print("=" * 50)

render_prog, _ = compile_format("%Y-%m-%d %H:%M:%S %z")
parse_prog, _ = compile_parse("%Y-%m-%d %H:%M:%S %z")

for hour in (9, 17):
    text, _ = render_program(render_prog, DateTime.of(2012, 5, 21, hour), offset=UtcOffset(9))
    print(text, "->", parse_program(parse_prog, text)[0])

# %C and %Z have no program representation.
_, errors = compile_parse("%C")
print(type(errors[0]).__name__)
# Output: NoCorrespondingRepresentationError
