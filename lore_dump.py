#!/usr/bin/env python3

"""
Dump the intermediate values of a lore file as YAML: the tokenized lines
and the forest built from them.
"""

import sys
import yaml
from lore_errors import LoreError
from lore_io import read_lore_file
from lore_line import format_line, parse_lines
from lore_node import calculate_depth
from lore_tree import into_nodes

def line_info( line ):
    result = { 'kind': line.kind, 'indent': line.indent }
    result.update( ( k, v ) for ( k, v ) in line._asdict().items() if k != 'indent' )
    return result

def node_info( node ):
    node_type = node.node_type
    result = { 'kind': node.kind }
    if node.kind == 'domain':
        variant = node_type.variant
        result['category'] = type( variant ).__name__
        result.update( variant._asdict() )
        result['rails'] = [ node_info( child ) for child in node.rails ]
    else:
        result.update( node_type._asdict() )
    return result

def dump_lines( lines ):
    return yaml.dump( [ line_info( line ) for line in lines ], sort_keys = False, allow_unicode = True )

def dump_nodes( nodes ):
    return yaml.dump( [ node_info( node ) for node in nodes ], sort_keys = False, allow_unicode = True )

def dump_report( lines, nodes ):
    out = []
    for line in lines:
        out.append( format_line( line ) )
    out.append( '' )
    out.append( dump_nodes( nodes ).rstrip( '\n' ) )
    out.append( '' )
    out.append( f'Root has {len( nodes )} top-level nodes' )
    for ( i, node ) in enumerate( nodes ):
        out.append( f'Top-level node {i} has depth {calculate_depth( node )}' )
    return '\n'.join( out ) + '\n'

def main( argv = None ):
    from optparse import OptionParser

    parser = OptionParser( "usage: %prog [options] {filename}" )
    parser.add_option( "", "--lines", dest="lines",
                      help="Dump the tokenized lines instead of the tree",
                      action="store_true", default=False )
    ( opts, args ) = parser.parse_args( argv )

    if len( args ) != 1:
        parser.error( 'invalid number arguments' )

    try:
        lines = parse_lines( read_lore_file( args[0] ) )
    except LoreError as e:
        print( e, file = sys.stderr )
        return 1

    if opts.lines:
        print( dump_lines( lines ), end = '' )
    else:
        print( dump_nodes( into_nodes( lines ) ), end = '' )
    return 0

if __name__ == '__main__':
    sys.exit( main() )
