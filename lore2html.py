#!/usr/bin/env python3

import sys
from pathlib import Path
from jinja2 import TemplateNotFound
from lore_config import LoreConfig
from lore_dump import dump_report
from lore_errors import LoreError
from lore_html import HTMLGenerator, template_paths
from lore_io import read_lore_file, write_html_file
from lore_line import parse_lines
from lore_tree import into_root

def extract_filename( path ):
    return Path( path ).stem or 'local'

def lore_to_html( text, title, config = None ):
    if config is None:
        config = LoreConfig()
    generator = HTMLGenerator(
        templates = config.get( 'html.templates' ),
        stylesheet = config.get( 'html.stylesheet' ) )
    lines = parse_lines( text )
    if config.get( 'html.layout' ) == 'flat':
        return generator.generate_flat( lines, title )
    root = into_root( title, lines )
    return generator.generate( root.nodes, root.name )

def convert( input_path, output_path, config, dump = False ):
    text = read_lore_file( input_path )
    title = config.get( 'html.title' ) or extract_filename( output_path )
    if dump:
        lines = parse_lines( text )
        print( dump_report( lines, into_root( title, lines ).nodes ), end = '' )
    html = lore_to_html( text, title, config )
    write_html_file( output_path, html )

def main( argv = None ):
    from optparse import OptionParser

    parser = OptionParser( "usage: %prog [options] {input.lore} {output.html}" )
    parser.add_option( "", "--config", dest="config",
                      help="Read settings from this YAML file",
                      metavar="PATH", type=str, default=None )
    parser.add_option( "", "--title", dest="title",
                      help="Document title, defaults to the output file name",
                      metavar="TEXT", type=str, default=None )
    parser.add_option( "", "--flat", dest="flat",
                      help="Write one paragraph per line instead of nested sections",
                      action="store_true", default=False )
    parser.add_option( "", "--dump", dest="dump",
                      help="Print the parsed lines and tree",
                      action="store_true", default=False )
    ( opts, args ) = parser.parse_args( argv )

    if len( args ) != 2:
        parser.error( 'invalid number arguments' )

    ( input_path, output_path ) = args

    try:
        config = LoreConfig()
        if opts.config:
            config.load( opts.config )
        if opts.title:
            config.set( 'html.title', opts.title )
        if opts.flat:
            config.set( 'html.layout', 'flat' )
        convert( input_path, output_path, config, opts.dump )
    except LoreError as e:
        print( e, file = sys.stderr )
        return 1
    except TemplateNotFound as e:
        search = ', '.join( template_paths( config.get( 'html.templates' ) ) )
        print( f'Error loading template {e.name}: not found in {search}', file = sys.stderr )
        return 1

    print( f'done from {input_path} to {output_path}' )
    return 0

if __name__ == '__main__':
    sys.exit( main() )
