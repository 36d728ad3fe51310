
import os
import tempfile
from pathlib import Path
from lore_errors import ReadError, WriteError

def read_lore_file( path ):
    try:
        with open( path, 'r', encoding = 'utf-8' ) as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise ReadError( path, 'not valid UTF-8 (' + str( e ) + ')' ) from e
    except OSError as e:
        raise ReadError( path, e.strerror or str( e ) ) from e

def write_html_file( path, html ):
    """
    Write the whole document next to its target, then move it into place,
    so a failed write never leaves a truncated file behind.
    """
    target = Path( path )
    tmp = None
    try:
        mode = target.stat().st_mode & 0o777 if target.is_file() else 0o644
        ( fd, tmp ) = tempfile.mkstemp( dir = target.parent, prefix = '.' + target.name + '.', suffix = '.tmp' )
        with os.fdopen( fd, 'w', encoding = 'utf-8' ) as f:
            f.write( html )
        os.chmod( tmp, mode )
        os.replace( tmp, target )
        tmp = None
    except OSError as e:
        raise WriteError( path, e.strerror or str( e ) ) from e
    finally:
        if tmp is not None and os.path.exists( tmp ):
            os.remove( tmp )
