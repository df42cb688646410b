from datetime import date
from html import escape
from typing import List

from chart import CELL_WIDTH, HEADER_HEIGHT, ROW_HEIGHT
from schemas import ChartModel

HTML_SHELL = r"""<!doctype html>
<html lang="zh-CN">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width, initial-scale=1" />
<title>Gantt</title>
<link rel="stylesheet" href="/static/gantt.css" />
</head>
<body>
<header class="toolbar">
  <div class="stats">
    <span>Resources: <b id="resourceCount">__RESOURCE_COUNT__</b></span>
    <span>Tasks: <b id="taskCount">__TASK_COUNT__</b></span>
    <span>Period: <b id="dateRange">__DATE_RANGE__</b></span>
  </div>
  <div class="actions">
    <button id="btnAddTask" type="button">Add task</button>
    <button id="btnResources" type="button">Resources</button>
    <button id="btnPeriod" type="button">Period</button>
    <button id="btnTheme" type="button">Theme</button>
  </div>
</header>
<main>
__BODY_MARKUP__
</main>
__DIALOGS_MARKUP__
<div id="statusMessage"></div>
<script src="/static/gantt.js"></script>
</body>
</html>
"""

# Диалоги: задача (добавление/правка/удаление), ресурсы, период проекта.
# Заполняются скриптом из /api/data, сохраняются через /api/orders, /api/resources, /api/dates.
DIALOGS_MARKUP = r"""<dialog id="taskDialog">
  <form id="taskForm" method="dialog">
    <h3 id="taskFormTitle">Task</h3>
    <input type="hidden" id="taskCode" />
    <label>Name <input id="taskName" required /></label>
    <label>Resource <select id="taskResource" required></select></label>
    <label>Start <input id="taskStart" type="date" required /></label>
    <label>End <input id="taskEnd" type="date" required /></label>
    <label>Color <input id="taskColor" type="color" value="#3498db" /></label>
    <div class="dialog-actions">
      <button id="btnTaskSave" type="submit">Save</button>
      <button id="btnTaskDelete" type="button" class="danger">Delete</button>
      <button type="button" data-close>Cancel</button>
    </div>
  </form>
</dialog>
<dialog id="resourceDialog">
  <h3>Resources</h3>
  <ul id="resourceItems"></ul>
  <form id="resourceForm">
    <input id="newResource" placeholder="New resource" required />
    <button type="submit">Add</button>
  </form>
  <div class="dialog-actions"><button type="button" data-close>Close</button></div>
</dialog>
<dialog id="periodDialog">
  <form id="periodForm" method="dialog">
    <h3>Project period</h3>
    <label>Start <input id="projectStart" type="date" required /></label>
    <label>End <input id="projectEnd" type="date" required /></label>
    <div class="dialog-actions">
      <button type="submit">Save</button>
      <button type="button" data-close>Cancel</button>
    </div>
  </form>
</dialog>
"""

EMPTY_MARKUP = '<div class="notice warning">No data yet: add resources and set the project period.</div>'


def format_day(value: str) -> str:
    # заголовок колонки: "10月19日"
    day = date.fromisoformat(value)
    return f"{day.month}月{day.day}日"


def _resource_column(rows: List[str]) -> str:
    cells = "".join(
        f'<tr class="gantt-row" style="height:{ROW_HEIGHT}px"><td class="resource-label">{escape(r)}</td></tr>'
        for r in rows
    )
    return (
        '<table class="resource-table">'
        f'<thead><tr style="height:{HEADER_HEIGHT}px"><th>Resource</th></tr></thead>'
        f'<tbody id="resourceBody">{cells}</tbody></table>'
    )


def _date_grid(chart: ChartModel) -> str:
    head = "".join(
        f'<th style="min-width:{CELL_WIDTH}px">{escape(format_day(d))}</th>' for d in chart.calendar
    )
    empty_row = "<td></td>" * len(chart.calendar)
    body = "".join(
        f'<tr class="gantt-row" style="height:{ROW_HEIGHT}px">{empty_row}</tr>' for _ in chart.rows
    )
    bars = "".join(
        f'<div class="gantt-bar" draggable="true" data-order-id="{escape(b.order_code)}"'
        f' title="{escape(b.title)}"'
        f' style="position:absolute;left:{b.left}px;top:{b.top}px;width:{b.width}px;'
        f'height:{b.height}px;line-height:{b.height}px;background-color:{escape(b.color)}">'
        f'<span class="gantt-bar-text">{escape(b.label)}</span>'
        f'<span class="gantt-bar-resource">{escape(b.resource_tag)}</span></div>'
        for b in chart.bars
    )
    return (
        '<div class="date-column" style="position:relative">'
        f'<table id="dateTable"><thead><tr style="height:{HEADER_HEIGHT}px">{head}</tr></thead>'
        f"<tbody>{body}</tbody></table>{bars}</div>"
    )


def render_page(chart: ChartModel) -> str:
    s = chart.stats
    if chart.rows and chart.calendar:
        markup = f'<div class="gantt">{_resource_column(chart.rows)}{_date_grid(chart)}</div>'
        period = f"{s.start} - {s.end} ({s.days} days)"
    else:
        markup = EMPTY_MARKUP
        period = "-"
    return (
        HTML_SHELL
        .replace("__RESOURCE_COUNT__", str(s.resources))
        .replace("__TASK_COUNT__", str(s.orders))
        .replace("__DATE_RANGE__", escape(period))
        .replace("__DIALOGS_MARKUP__", DIALOGS_MARKUP)
        .replace("__BODY_MARKUP__", markup)
    )
