
import site
import sysconfig
from pathlib import Path
from jinja2 import Environment, FileSystemLoader
from lore_config import DEFAULT_STYLESHEET

# Source checkouts keep templates beside the module; installs put them
# under share/lore2html/templates of the install scheme.
TEMPLATES = Path( __file__ ).resolve().parent / 'templates'
INSTALLED_TEMPLATES = Path( 'share', 'lore2html', 'templates' )

def template_paths( templates = None ):
    search = []
    if templates:
        search.append( str( templates ) )
    search.append( str( TEMPLATES ) )
    for base in ( sysconfig.get_path( 'data' ), site.getuserbase() ):
        path = str( Path( base ) / INSTALLED_TEMPLATES )
        if path not in search:
            search.append( path )
    return search

# Forest entries sit one level inside the title container.
TOP_LEVEL = 2

def margin_left( indent ):
    return indent * 20

def indentation( level ):
    return '  ' * level

class HTMLGenerator:
    def __init__( self, templates = None, stylesheet = DEFAULT_STYLESHEET ):
        self.stylesheet = stylesheet
        self.env = Environment(
            loader = FileSystemLoader( template_paths( templates ) ),
            keep_trailing_newline = True,
        )
        self.env.filters['margin_left'] = margin_left
        self.env.globals['indentation'] = indentation

    def generate( self, nodes, title ):
        body = ''.join( self.render_node( node, TOP_LEVEL ) for node in nodes )
        template = self.env.get_template( 'document.html' )
        return template.render( title = title, stylesheet = self.stylesheet, body = body )

    def generate_flat( self, lines, title ):
        template = self.env.get_template( 'flat.html' )
        return template.render( title = title, stylesheet = self.stylesheet, lines = lines )

    def render_node( self, node, level = TOP_LEVEL ):
        html = getattr( self, 'html_' + node.kind )
        return html( node, level )

    def html_placeholder( self, node, level ):
        return ''

    def html_comment( self, node, level ):
        return ''

    def html_domain( self, node, level ):
        body = ''.join( self.render_node( child, level + 1 ) for child in node.rails )
        template = self.env.get_template( 'domain.html' )
        return template.render(
            level = level,
            is_open = level == TOP_LEVEL,
            title = node.node_type.variant.title(),
            has_rails = len( node.rails ) > 0,
            body = body )

    def html_rail( self, node, level ):
        template = self.env.get_template( 'rail.html' )
        return template.render( level = level, content = node.node_type )

    def html_element( self, node, level ):
        template = self.env.get_template( 'element.html' )
        return template.render( level = level, content = node.node_type )
