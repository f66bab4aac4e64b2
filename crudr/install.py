"""

    crudr.install -- add CRUD shortcuts to application base controller
    ==================================================================

    One-shot installer which patches application base controller source so
    every controller gets :class:`crudr.controller.CRUDMixin`::

        $ crudr-install app/controllers/base.py

    Patching is idempotent, running it twice leaves the file unchanged.

"""

import re
import sys
import logging
import argparse

from crudr.exc import InstallError

__all__ = ('patch_controller', 'install', 'main')

log = logging.getLogger(__name__)

IMPORT_LINE = 'from crudr import CRUDMixin'
MIXIN = 'CRUDMixin'
DEFAULT_PATH = 'app/controllers/base.py'

_import_re = re.compile(
    r'^from\s+crudr(\.controller)?\s+import\s+[^\n]*\bCRUDMixin\b',
    re.MULTILINE)
_any_import_re = re.compile(r'^(import|from)\s+(?P<module>[\w.]+)', re.MULTILINE)

def _class_re(class_name):
    return re.compile(
        r'^class\s+%s\s*(\((?P<bases>[^)]*)\))?\s*:' % re.escape(class_name),
        re.MULTILINE)

def _insert_import(source, class_match):
    position = None
    after_future = None
    for m in _any_import_re.finditer(source):
        if m.group('module') == '__future__':
            after_future = source.index('\n', m.end()) + 1 \
                if '\n' in source[m.end():] else len(source)
            continue
        position = m.start()
        break
    if position is None:
        position = after_future
    if position is None:
        position = class_match.start()
        return source[:position] + IMPORT_LINE + '\n\n\n' + source[position:]
    return source[:position] + IMPORT_LINE + '\n' + source[position:]

def _add_mixin(source, class_match):
    bases = class_match.group('bases')
    if bases is not None:
        names = [b.strip() for b in bases.split(',')]
        if MIXIN in [n.split('.')[-1] for n in names]:
            return source
        start = class_match.start('bases')
        rest = bases.strip()
        # mixins go first so their methods win in MRO
        new_bases = MIXIN + (', ' + rest if rest else '')
        return (source[:start] + new_bases
            + source[class_match.end('bases'):])
    head = source[class_match.start():class_match.end()]
    patched = head[:-1].rstrip() + '(%s):' % MIXIN
    return source[:class_match.start()] + patched + source[class_match.end():]

def patch_controller(source, class_name='Controller'):
    """ Return ``source`` with the mixin import and the mixin base added to
    ``class_name`` class, each only if it's missing

    :raises crudr.exc.InstallError:
        if there's no ``class_name`` class defined at module level
    """
    class_re = _class_re(class_name)
    if class_re.search(source) is None:
        raise InstallError("class '%s' not found" % class_name)

    if _import_re.search(source) is None:
        source = _insert_import(source, class_re.search(source))

    return _add_mixin(source, class_re.search(source))

def install(path, class_name='Controller'):
    """ Patch controller file at ``path`` in place

    :returns:
        true if the file was changed
    """
    with open(path) as f:
        source = f.read()
    patched = patch_controller(source, class_name=class_name)
    if patched == source:
        return False
    with open(path, 'w') as f:
        f.write(patched)
    return True

def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='crudr-install',
        description='Update the base controller to include CRUD shortcuts')
    parser.add_argument('path', nargs='?', default=DEFAULT_PATH,
        help='base controller module (default: %(default)s)')
    parser.add_argument('--class-name', default='Controller',
        help='base controller class name (default: %(default)s)')
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format='%(message)s')
    log.info('Installing crudr to %s in %s', args.class_name, args.path)
    try:
        changed = install(args.path, class_name=args.class_name)
    except (OSError, InstallError) as e:
        log.error('Installation failed: %s', e)
        return 1
    if changed:
        log.info('Installation completed successfully')
    else:
        log.info('Already installed, nothing to do')
    return 0

if __name__ == '__main__':
    sys.exit(main())
