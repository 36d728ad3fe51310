
from collections import namedtuple

class Variant:
    __slots__ = ()

    def __eq__( self, other ):
        return type( self ) is type( other ) and tuple.__eq__( self, other )

    def __ne__( self, other ):
        return not self == other

    def __hash__( self ):
        return hash( ( type( self ).__name__, ) + tuple( self ) )

class PlaceHolder( Variant, namedtuple( 'PlaceHolder', 'indent' ) ):
    __slots__ = ()
    kind = 'placeholder'

class Atom( Variant, namedtuple( 'Atom', 'text indent' ) ):
    __slots__ = ()
    kind = 'atom'

class Comment( Variant, namedtuple( 'Comment', 'text indent' ) ):
    __slots__ = ()
    kind = 'comment'

class Link( Variant, namedtuple( 'Link', 'name value indent' ) ):
    __slots__ = ()
    kind = 'link'

class Domain( Variant, namedtuple( 'Domain', 'name indent' ) ):
    __slots__ = ()
    kind = 'domain'

class Reference( Variant, namedtuple( 'Reference', 'name value indent' ) ):
    __slots__ = ()
    kind = 'reference'

line_kinds = ( PlaceHolder, Atom, Comment, Link, Domain, Reference )

def leading_whitespace( line ):
    return len( line ) - len( line.lstrip() )

def split_once( text, sep ):
    ( left, _, right ) = text.partition( sep )
    return ( left.strip(), right.strip() )

def parse_line( line ):
    """
    Classify one non-blank line.

    Two leading whitespace characters make one level of indentation, odd
    counts round down and a tab counts as one character. The prefixes are
    checked in order: placeholder, comment, domain or reference, link,
    bare reference (``name > value``), atom.
    """
    spaces = leading_whitespace( line )
    indent = spaces // 2
    trimmed = line[spaces:]

    if trimmed == '#':
        return PlaceHolder( indent )

    if trimmed.startswith( '#' ) and len( trimmed ) > 1:
        return Comment( trimmed[1:].strip(), indent )

    if trimmed.startswith( '+' ) and len( trimmed ) > 1:
        rest = trimmed[1:].strip()
        if '>' in rest:
            ( name, value ) = split_once( rest, '>' )
            return Reference( name, value, indent )
        return Domain( rest, indent )

    if '=' in trimmed:
        ( name, value ) = split_once( trimmed, '=' )
        return Link( name, value, indent )

    # Unprefixed references need a spaced arrow so inline markup stays an atom.
    if ' > ' in trimmed:
        ( name, value ) = split_once( trimmed, ' > ' )
        return Reference( name, value, indent )

    return Atom( trimmed.strip(), indent )

def parse_lines( text ):
    lines = [ line.rstrip( '\r' ) for line in text.split( '\n' ) ]
    return [ parse_line( line ) for line in lines if line.strip() ]

def format_line( line ):
    spaces = '  ' * line.indent
    kind = line.kind
    if kind == 'placeholder':
        return spaces + '#'
    elif kind == 'comment':
        return spaces + '#' + line.text
    elif kind == 'atom':
        return spaces + line.text
    elif kind == 'link':
        return f'{spaces}{line.name} = {line.value}'
    elif kind == 'domain':
        return f'{spaces}+ {line.name}'
    elif kind == 'reference':
        return f'{spaces}+ {line.name} > {line.value}'
    raise ValueError( 'unknown line kind ' + repr( kind ) )
