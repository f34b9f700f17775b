# auriga

Building blocks for an application that runs several coding agents side by
side. Everything is in-memory and uses only the standard library.

- `auriga.models`: shared types such as `AgentId`, `Agent`, `FileEntry`,
  `FileActivity`, `TokenUsage`, `TraceId`, `Trace` and `ScrollDirection`.
- `auriga.agents.AgentStore`: creates agents named `"<provider> #<8 hex digits>"`,
  and looks them up and removes them.
- `auriga.traces.TraceStore`: agent sessions that are active, complete or
  aborted. `take_finished()` removes and returns the ones that are no longer
  active.
- `auriga.turns`: conversation turns (`TurnBuilder`, `Turn`, content blocks,
  per-role metadata) and `TurnStore`, which assigns sequential `TurnId`s and
  per-agent turn numbers and sums token usage over assistant turns.
- `auriga.file_activity.FileActivityStore`: a flat record of modified paths,
  newest first.
- `auriga.file_tree.FileTree`: a depth-annotated project tree with
  collapsible directories, cached visible and recent-activity views, and
  insertion of new paths in sorted position (directories before files).
- `auriga.scrollable.Scrollable`: scroll offset and selection for a list view.
- `auriga.grid`: a column grid whose cells can span columns and rows,
  resolved to `Rect`s by `Grid.compute_rects`. Grids convert to and from
  plain dicts with `Grid.to_dict` and `Grid.from_dict`.
- `auriga.skills`: the `Skill` base class, the built-in `CodeReviewSkill` and
  `SkillRegistry`, which raises `DuplicateSkillError` when a name is
  registered twice.
- `auriga.jsonrpc`: JSON-RPC 2.0 `Request` parsing (raising
  `JsonRpcParseError`) and `Response` building.
- `auriga.mcp_handler` and `auriga.mcp_server`: a tool server over HTTP POST
  on `127.0.0.1` with the tools `list_agents` and `send_message`.

## Installation

```
pip install .
```

## Examples

Agents and their traces:

```python
from auriga.agents import AgentStore
from auriga.traces import TraceStore

agents = AgentStore()
agent_id = agents.create("claude")

traces = TraceStore()
trace_id = traces.create(agent_id, "session-1", "claude", "2026-01-01T00:00:00Z")
traces.complete(trace_id, "2026-01-01T00:05:00Z")
finished = traces.take_finished()
```

A file tree with recent activity:

```python
from auriga.file_tree import FileTree
from auriga.models import FileEntry

tree = FileTree("/project")
tree.set_entries([
    FileEntry.dir("/project/src", 0),
    FileEntry.file("/project/src/main.rs", 1),
])
tree.record_activity("/project/src/main.rs", agent_id)
tree.refresh_caches()
print([e.display_name() for e in tree.recent_activity(10)])
```

Laying out widgets:

```python
from auriga.grid import Grid, Rect

for cell in Grid.default().compute_rects(Rect(0, 0, 200, 60)):
    print(cell.widget, cell.rect)
```

Running the tool server on a free port. Tool calls arrive on
`server.events` as `McpEvent`s; the HTTP request waits until the event is
answered with `reply()`:

```python
from auriga.mcp_handler import AgentInfo, Agents, ListAgents, McpFailure, MessageSent
from auriga.mcp_server import start_mcp_server

with start_mcp_server(0) as server:
    print("listening on port", server.port)
    event = server.events.get()
    if isinstance(event.request, ListAgents):
        event.reply(Agents([AgentInfo("abc-123", "claude #a3f7b2c1", "Idle")]))
    else:
        event.reply(MessageSent())
```

Requests can also be handled without HTTP:

```python
import queue
from auriga.jsonrpc import Request
from auriga.mcp_handler import handle_request

request = Request.from_json('{"jsonrpc":"2.0","id":1,"method":"tools/list"}')
print(handle_request(request, queue.Queue()).to_json())
```

## What this package does not do

It has no terminal screen, no command-line program, no persistent storage
and does not start or talk to agent processes. It holds the state and
layout such an application needs and serves the tool requests; acting on
those requests is up to the code that reads `server.events`.

## Tests

```
pip install .[test]
pytest
```