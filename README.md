# zonda_ide

A handful of console tools for working through small C and C++ programs:
building them with shared makefiles, running every executable in a
directory (optionally with test input), inspecting program output
character by character, and bundling `.test` input files.

The tools call out to other programs: `make` (and the compilers named in
the makefiles, `gcc` and `g++`) for building, `valgrind` when asked for,
and `glow` to display the help page.

## Installation

```
pip install .
```

This installs the commands `compile`, `run`, `settings`, `char_ins` and
`tfmanager`.

## Setting up

Write the default makefiles for C and C++ into `~/.zonda.ide/makefiles`
(`makefile-c`, `makefile-c-prj`, `makefile-cpp`, `makefile-cpp-prj`):

```
settings -initial
```

- `settings -reset` asks for confirmation, removes the files in
  `~/.zonda.ide/makefiles` and writes the four defaults again. Any answer
  other than one starting with `n`/`N` goes ahead.
- `settings --help` shows `~/.zonda.ide/README.md` with `glow`; it fails if
  that file cannot be read.
- `settings -uninstall` asks for confirmation (`Y`, `y` or Enter to go
  ahead, `N`/`n` to stop) and then removes `~/bin/compile`, `~/bin/run`,
  `~/bin/settings`, `~/bin/char_ins`, `~/bin/tfmanager` and the whole
  `~/.zonda.ide` directory.

## Compiling

```
compile hello.c          # build one file with makefile-c
compile game.cpp         # a directory named game.cpp is built with makefile-cpp-prj
compile -c               # build everything with makefile-c and/or makefile-c-prj
compile -c clean         # run the clean target of those makefiles
```

A makefile for a language is looked up as
`~/.zonda.ide/makefiles/makefile-<ext>`, and for projects (directories
such as `name.c/`) as `makefile-<ext>-prj`. A missing makefile is
reported and nothing is built. The language flag itself may not end in
`-prj`.

## Running

```
run                      # run every executable in the directory, sorted
run -c                   # run the programs belonging to *.c files
run -test hello          # feed hello.test to ./hello on standard input
run -valgrind -char_ins hello
```

Flags come before file names; the language flag (such as `-c`) must come
first, and cannot be combined with file names. `-test`, `-valgrind` and
`-char_ins` may each be given once. `-test` is used only where a matching
`<name>.test` file exists; `-char_ins` pipes the output through the
`char_ins` command. Files are listed by extension, then by name. For a
file such as `hello.c` that is not itself executable, the program
`./hello` is run; scripts with a `#!` line are run through their
interpreter. Each run is preceded by a `===== name =====` title line.

## Inspecting output

```
./hello | char_ins
char_ins < output.txt
```

Newlines and tabs are shown as `\n` and `\t`, spaces are highlighted,
control characters are shown with their codes, bytes outside ASCII are
marked, and the end of each line read is shown as `\0`. A summary of
counts (tabs, spaces, control characters, ordinary characters, unknown
bytes, total characters and lines) is printed at the end. `char_ins --help`
explains the colours.

## Test input files

```
tfmanager -merge         # join every *.test file into all.test, removing them
tfmanager -divide        # split all.test back into its files, removing it
```

Each file in `all.test` begins with a `===== name.test =====` line.
Merging stops if `all.test` already exists.

## Using the modules

The commands are thin layers over importable functions, for example
`zonda_ide.char_ins.inspect`, `zonda_ide.tfmanager.merge` and
`zonda_ide.tfmanager.divide`, `zonda_ide.builder.compile_path`,
`zonda_ide.runner.build_command` and `zonda_ide.settings.write_makefiles`.