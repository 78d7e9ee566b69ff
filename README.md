# lsmeta

`lsmeta` reads and renders the separate pieces of information that an `ls`-style listing shows about a file. These are its name, type, trailing indicator, permissions, size, modification date, owner, inode, hard-link count, symlink target and access-control markers.

Each piece is a small frozen value with a `render` method that returns plain text.

## Installation

```
pip install lsmeta
```

## Usage

### Permissions

```python
from lsmeta.permissions import Permissions, PermissionFlag

Permissions.from_mode(0o655).render(PermissionFlag.RWX)     # "rw-r-xr-x"
Permissions.from_mode(0o1777).render(PermissionFlag.RWX)    # "rwxrwxrwt"
Permissions.from_mode(0o1777).render(PermissionFlag.OCTAL)  # "1777"
Permissions.from_path("/etc/hosts").is_executable()
```

### Sizes

```python
from lsmeta.size import Size, SizeFlag

size = Size(42 * 1024)
size.value_string()                # "42"
size.unit_string()                 # "KB"
size.unit_string(SizeFlag.SHORT)   # "K"
size.render(SizeFlag.SHORT, 3)     # " 42K"
Size(4 * 1024).value_string()      # "4.0"
```

`Size.render` raises `ValueError` when the alignment is narrower than the value.

### File types and indicators

```python
import os
from lsmeta.filetype import FileType, FileKind
from lsmeta.indicator import Indicator

file_type = FileType.from_stat(os.lstat("/tmp"))
file_type.render()                 # "d"
file_type.is_dirlike()             # True
Indicator.from_file_type(FileType(FileKind.FILE, exec=True)).render(True)  # "*"
```

### Inode, links and owner

```python
import os
from lsmeta.nodeinfo import INode, Links, Owner

st = os.stat("/etc/hosts")
INode.from_stat(st).render()
Links.from_stat(st).render()
Owner.from_stat(st).render_user()
```

If a user or group name cannot be found, its numeric id is shown instead.

### Access control

```python
from lsmeta.access_control import AccessControl

AccessControl.for_path("/etc/hosts").render_method()     # "+", "." or ""
AccessControl.from_data(False, b"a", b"b").render_context()  # "a+b"
```

### Dates

```python
from lsmeta.date import Date, DateFlag, DateFormat

date = Date.from_timestamp(1_600_000_000)
date.date_string(DateFlag.DATE)
date.date_string(DateFlag.ISO)
date.date_string(DateFlag.RELATIVE)
date.date_string(DateFormat(DateFlag.FORMATTED, "%Y-%m-%d"))
date.age_elem()                    # "hour_old", "day_old" or "older"
```

A timestamp that cannot be represented gives an invalid date, which renders as `-`.

### Symlinks

```python
from lsmeta.symlink import SymLink

SymLink(target="/target", valid=True).render()   # " ⇒ /target"
```

### Names

```python
from pathlib import Path
from lsmeta.filetype import FileType, FileKind
from lsmeta.name import Name, DisplayOption

name = Name(Path("/home/parent1/child"), FileType(FileKind.FILE))
name.relative_path("/home/parent2")          # Path("../parent1/child")
name.escape("a$a.txt", True)                 # "'a$a.txt'"
name.render(DisplayOption(base_path=Path("/home/parent1")))  # "child"
```

Names compare and hash case-insensitively. `Name.hyperlink` wraps text in a terminal hyperlink escape sequence that points at the resolved file.

### Colour

Every `render` method takes an optional `colorize` callable. It receives the text and the name of the element being drawn, for example `"dir"`, `"read"`, `"file_large"` or `"hour_old"`, and returns the text to use. Without it, output is plain text.

## What the package does not do

`lsmeta` deals with one field at a time. It does not assemble a full record for a file, walk directories, total directory sizes or sort entries. It has no command-line program.

## Running the tests

```
pip install -e .[test]
pytest
```