# mosuser

User-space pieces of a small teaching operating system, written as a plain
Python library with no dependencies. Every piece works on its own, without a
kernel: address arithmetic, option scanning, path resolution and the front end
of the system's shell.

## What it contains

- `mosuser.mmu`: memory layout constants (`PAGE_SIZE`, `PDMAP`, `ULIM`,
  `USTACKTOP`, `UTEMP`, the `PTE_*` flags and so on) and address arithmetic:
  `pdx`, `ptx`, `pte_addr`, `pte_flags`, `ppn`, `vpn`, `round_up`,
  `round_down`, `genmask`, `genmask_ull`, `log2`, `paddr` and `kaddr`.
  `round_up` and `round_down` raise `ValueError` unless `n` is a power of two;
  `paddr` and `kaddr` raise `ValueError` for addresses out of range.
- `mosuser.args`: scanning of clustered single-letter options such as `-abc`.
  `ArgScanner` yields option letters; `argument()` takes an option's value and
  `rest()` returns the remaining words. `parse_flags(argv, allowed)` counts the
  flags and raises `UsageError` for one not in `allowed`.
- `mosuser.paths`: `resolve_path(path, cwd)` turns a path into an absolute one.
  Absolute paths and program names ending in `.b` are kept; `..` climbs one
  level and `.` stands for the working directory.
- `mosuser.history`: `History`, a bounded list of recent command lines. It skips
  empty lines and immediate repeats, drops the oldest line when full, and can
  be loaded from and dumped to newline-separated text.
- `mosuser.lexer`: `tokenize(line, variables)` splits a command line into
  `Token`s of a `TokenKind` (words, `<`, `>`, `>>`, `|`, `||`, `&&`, `&`, `;`,
  `(`, `)`), substituting `$name` from `variables`.
- `mosuser.lineedit`: `LineEditor`, which builds an input line one typed
  character at a time and returns the terminal output each one causes. It
  handles backspace, Ctrl-A, Ctrl-E, Ctrl-K, Ctrl-U, Ctrl-W, the left and right
  arrow keys, and up/down for history recall.
- `mosuser.shell`: the shell's built-in commands. `Shell` keeps the working
  directory, the variables and the history, and `run_builtin` runs `exit`,
  `history`, `cd`, `pwd`, `declare` and `unset` (each also under its `.b`
  name). Helpers: `is_builtin`, `strip_comment`, `substitute_backquotes` and
  `parse_declare`.

## Installing

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Example

    from mosuser.paths import resolve_path
    print(resolve_path("../etc", "/home/user"))   # /home/etc

    from mosuser.shell import Shell
    dirs = {"/": True, "/usr": True, "/motd": False}
    sh = Shell(dirs.get)              # returns None where nothing exists
    sh.run_builtin("cd /usr")
    print(sh.run_builtin("pwd"), end="")          # /usr
    sh.run_builtin("declare -x NAME=world")
    print(sh.run_builtin("declare"), end="")      # NAME=world

    from mosuser.lexer import tokenize
    print([t.text for t in tokenize("echo $NAME | cat", {"NAME": "world"})])
    # ['echo', 'world', '|', 'cat']

    from mosuser.lineedit import LineEditor
    editor = LineEditor(history=["ls -l"])
    for ch in "\x1b[A\n":                         # up arrow, then Enter
        editor.feed(ch)
    print(editor.text())                           # ls -l

## What it does not do

The package holds no file system, no file descriptor table, no pipes and no
console device, and it does not load or run programs. `Shell` runs only its
built-in commands; any other command line is left to the caller, and
`substitute_backquotes` takes the function that runs a command as an argument.
`cd` asks the `is_directory` callable it is given rather than looking at any
storage. There is no command-line entry point.