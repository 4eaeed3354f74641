"""Focus stack, typed filter, menus and per-resource panel ordering and commands."""