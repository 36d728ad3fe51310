
from lore_node import node_from_line

class Root:
    def __init__( self, name, nodes ):
        self.name = name
        self.nodes = nodes

    def __repr__( self ):
        return f'Root({self.name!r}, {self.nodes!r})'

def into_nodes( lines ):
    """
    Build the forest from tokenized lines.

    The stack holds ( indent, node ) for every domain that can still take
    children, shallowest first. A line closes every open domain at its own
    indent or deeper, then hangs off whatever is left on top; with nothing
    left it becomes a root. Indentation jumps are not checked.
    """
    forest = []
    stack = []

    for line in lines:
        node = node_from_line( line )

        while stack and stack[-1][0] >= line.indent:
            stack.pop()

        if stack:
            stack[-1][1].rails.append( node )
        else:
            forest.append( node )

        if node.is_domain():
            stack.append( ( line.indent, node ) )

    return forest

def into_root( name, lines ):
    return Root( name, into_nodes( lines ) )
