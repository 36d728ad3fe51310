
from collections import namedtuple
from lore_line import Variant

class Category1( Variant, namedtuple( 'Category1', 'name' ) ):
    __slots__ = ()

    def title( self ):
        return self.name

class Category2( Variant, namedtuple( 'Category2', 'name value' ) ):
    __slots__ = ()

    def title( self ):
        return f'{self.name} = {self.value}'

class PlaceHolder( Variant, namedtuple( 'PlaceHolder', '' ) ):
    __slots__ = ()
    kind = 'placeholder'

class Comment( Variant, namedtuple( 'Comment', 'text' ) ):
    __slots__ = ()
    kind = 'comment'

class Element( Variant, namedtuple( 'Element', 'text' ) ):
    __slots__ = ()
    kind = 'element'

class Rail( Variant, namedtuple( 'Rail', 'name value' ) ):
    __slots__ = ()
    kind = 'rail'

class Domain( Variant, namedtuple( 'Domain', 'variant' ) ):
    __slots__ = ()
    kind = 'domain'

class Node:
    """
    One entry of the tree. Only domain nodes ever get rails.
    """
    def __init__( self, node_type, rails = None ):
        self.node_type = node_type
        self.rails = [] if rails is None else rails

    @property
    def kind( self ):
        return self.node_type.kind

    def is_domain( self ):
        return self.node_type.kind == 'domain'

    def __eq__( self, other ):
        if not isinstance( other, Node ):
            return NotImplemented
        return self.node_type == other.node_type and self.rails == other.rails

    def __repr__( self ):
        if self.rails:
            return f'Node({self.node_type!r}, {self.rails!r})'
        return f'Node({self.node_type!r})'

    __hash__ = None

mapping_line = {
    'placeholder': lambda line: PlaceHolder(),
    'comment': lambda line: Comment( line.text ),
    'atom': lambda line: Element( line.text ),
    'link': lambda line: Rail( line.name, line.value ),
    'domain': lambda line: Domain( Category1( line.name ) ),
    'reference': lambda line: Domain( Category2( line.name, line.value ) ),
}

def node_from_line( line ):
    return Node( mapping_line[line.kind]( line ) )

def calculate_depth( node, current_depth = 0 ):
    if not node.rails:
        return current_depth
    return max( calculate_depth( child, current_depth + 1 ) for child in node.rails )
