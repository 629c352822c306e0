import sys
import typing as tp
import warnings

from alpha_rename.nodes import Node
from alpha_rename.visitors import NameContext, collect_names, free_names
from . import Pass, PASS_ARGS_T

__ALL__ = ['debug']


def _name_table(tree: Node) -> tp.List[str]:
    """
    One line per local binding (uid then symbol) in uid order,
    then the globals the tree refers to
    """
    bound = (n for n in collect_names(tree, NameContext.BIND) if not n.is_global)
    lines = [f'{name.uid:>4} {name}' for name in sorted(bound, key=lambda n: n.uid)]
    free = sorted(str(n) for n in free_names(tree))
    if free:
        lines.append('free: ' + ' '.join(free))
    return lines


class debug(Pass):
    def __init__(self,
            dump_ast: bool = False,
            dump_names: bool = False,
            dump_metadata: bool = False,
            file: tp.Optional[str] = None,
            append: tp.Optional[bool] = None,
            ):
        self.dump_ast = dump_ast
        self.dump_names = dump_names
        self.dump_metadata = dump_metadata
        if append is not None and file is None:
            warnings.warn('Option append has no effect when file is None', stacklevel=2)
        self.file = file
        self.append = append

    def rewrite(self,
            tree: Node,
            metadata: tp.MutableMapping) -> PASS_ARGS_T:
        sections = []
        if self.dump_ast:
            sections.append(('ast', [repr(tree)]))
        if self.dump_names:
            sections.append(('names', _name_table(tree)))
        if self.dump_metadata:
            sections.append(('metadata', [f'{k} = {v!r}' for k, v in metadata.items()]))

        text = ''.join(
            f'-- {title} --\n' + ''.join(line + '\n' for line in lines)
            for title, lines in sections
        )
        if self.file is None:
            sys.stdout.write(text)
        else:
            with open(self.file, 'a' if self.append else 'w') as fp:
                fp.write(text)

        return tree, metadata
