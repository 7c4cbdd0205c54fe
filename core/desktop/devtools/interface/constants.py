"""Interface-level constants for the taskman session."""

PROMPT = "> "

HELP_TEXT = """<command> <arg1> <arg2> ...
help
show <id>
add "<title>" "<description>" <priority> <status>
remove <id>
description <id> "<description>"
priority <id> <low|medium|high>
status <id> <todo|doing|done>
sort <none|id|title|priority|status>
save
quit
"""

LANG_PACK = {
    "en": {
        # Panel titles
        "PANEL_TODO": "ToDo",
        "PANEL_DOING": "Doing",
        "PANEL_DONE": "Done",
        "PANEL_ERRORS": "Errors",
        "PANEL_COMMANDS": "Commands",
        "PANEL_DETAIL": "Show",
        # Parser
        "ERR_INVALID_COMMAND": "Invalid command '{command}'...",
        "ERR_UNEXPECTED_ARGS": "Unexpected arguments for command '{command}'...",
        "ERR_MISSING_ARG": "Missing <{arg}> argument for command '{command}'...",
        "ERR_INVALID_TASK_ID": "Invalid task id '{value}' for command '{command}'...",
        "ERR_INVALID_PRIORITY": "Invalid priority '{value}' for command '{command}' (expected {choices})...",
        "ERR_INVALID_STATUS": "Invalid status '{value}' for command '{command}' (expected {choices})...",
        "ERR_INVALID_SORT": "Invalid sort key '{value}' for command '{command}' (expected {choices})...",
        "ERR_UNTERMINATED_QUOTE": "Unterminated quote in input...",
        # Store / dispatcher
        "ERR_TASK_NOT_FOUND": "Task not found: could not find task with id '{id}'...",
        "ERR_TASK_TITLE_NOT_FOUND": "Task not found: could not find task titled '{title}'...",
        "ERR_NO_SAVE_FILE": "No save file configured...",
        "ERR_TASK_IDS_EXHAUSTED": "No task ids left: the last id {max_id} is already taken...",
        "ERR_TASK_IDS_EXHAUSTED": "No task ids left: the last id {max_id} is already taken...",
        # Session
        "ERR_RENDER_FAILED": "Render failed: {error}",
        "ERR_STARTUP_LOAD": "Could not load tasks, starting empty: {error}",
        "ERR_INPUT_DECODE": "Input line could not be decoded: {error}",
        "ERR_TERMINAL_SIZE": "Could not query terminal size: {error}",
        "ERR_TERMINAL_TOO_SMALL": "Terminal is {columns}x{rows}; at least {min_columns}x{min_rows} is required",
        "ERR_PANEL_TOO_NARROW": "Panel '{title}' needs width >= {min_width}, got {width}",
        "ERR_PANEL_TOO_SHORT": "Panel '{title}' needs height >= 2, got {height}",
        "STATUS_GOODBYE": "Goodbye.",
    },
    "ru": {
        "PANEL_TODO": "Todo",
        "PANEL_DOING": "Делаю",
        "PANEL_DONE": "Готово",
        "PANEL_ERRORS": "Ошибки",
        "PANEL_COMMANDS": "Команды",
        "PANEL_DETAIL": "Задача",
        "ERR_INVALID_COMMAND": "Неизвестная команда '{command}'...",
        "ERR_UNEXPECTED_ARGS": "Лишние аргументы для команды '{command}'...",
        "ERR_MISSING_ARG": "Не хватает аргумента <{arg}> для команды '{command}'...",
        "ERR_INVALID_TASK_ID": "Неверный id задачи '{value}' для команды '{command}'...",
        "ERR_INVALID_PRIORITY": "Неверный приоритет '{value}' для команды '{command}' (ожидается {choices})...",
        "ERR_INVALID_STATUS": "Неверный статус '{value}' для команды '{command}' (ожидается {choices})...",
        "ERR_INVALID_SORT": "Неверный ключ сортировки '{value}' для команды '{command}' (ожидается {choices})...",
        "ERR_UNTERMINATED_QUOTE": "Незакрытая кавычка во вводе...",
        "ERR_TASK_NOT_FOUND": "Задача не найдена: нет задачи с id '{id}'...",
        "ERR_TASK_TITLE_NOT_FOUND": "Задача не найдена: нет задачи с заголовком '{title}'...",
        "ERR_NO_SAVE_FILE": "Файл сохранения не задан...",
        "ERR_TASK_IDS_EXHAUSTED": "Свободных id не осталось: последний id {max_id} уже занят...",
        "ERR_TASK_IDS_EXHAUSTED": "Свободных id не осталось: последний id {max_id} уже занят...",
        "ERR_RENDER_FAILED": "Ошибка отрисовки: {error}",
        "ERR_STARTUP_LOAD": "Не удалось загрузить задачи, список пуст: {error}",
        "ERR_INPUT_DECODE": "Не удалось декодировать строку ввода: {error}",
        "STATUS_GOODBYE": "До встречи.",
    },
}
