
from pathlib import Path
import yaml
from lore_errors import ConfigError

DEFAULT_STYLESHEET = 'https://fleetinglore.github.io/collection/collection.css'

DEFAULT_CONFIG_YAML = f"""
html:
  title: null
  stylesheet: {DEFAULT_STYLESHEET}
  templates: null
  layout: nested
"""

layouts = [ 'nested', 'flat' ]

def deep_merge( base, overlay ):
    result = base.copy()
    for key, value in overlay.items():
        if key in result and isinstance( result[key], dict ) and isinstance( value, dict ):
            result[key] = deep_merge( result[key], value )
        else:
            result[key] = value
    return result

class LoreConfig:
    def __init__( self ):
        self.config = yaml.safe_load( DEFAULT_CONFIG_YAML )
        self.config_path = None

    def load( self, path ):
        path = Path( path )
        try:
            with path.open( 'r', encoding = 'utf-8' ) as f:
                user_config = yaml.safe_load( f )
        except OSError as e:
            raise ConfigError( path, e.strerror or str( e ) ) from e
        except yaml.YAMLError as e:
            raise ConfigError( path, 'invalid YAML: ' + str( e ) ) from e

        if user_config is None:
            user_config = {}
        if not isinstance( user_config, dict ):
            raise ConfigError( path, 'expected a mapping at the top level' )

        merged = deep_merge( self.config, user_config )
        if not isinstance( merged.get( 'html' ), dict ):
            raise ConfigError( path, 'expected a mapping under html' )
        layout = merged['html'].get( 'layout' )
        if layout not in layouts:
            raise ConfigError( path, f'unknown layout {layout!r}, expected one of {", ".join( layouts )}' )
        stylesheet = merged['html'].get( 'stylesheet' )
        if not isinstance( stylesheet, str ) or not stylesheet.strip():
            raise ConfigError( path, f'stylesheet must be a non-empty string, got {stylesheet!r}' )

        self.config = merged
        self.config_path = path
        return self

    def get( self, key_path, default = None ):
        value = self.config
        for key in key_path.split( '.' ):
            if not isinstance( value, dict ) or key not in value:
                return default
            value = value[key]
        return value

    def set( self, key_path, value ):
        keys = key_path.split( '.' )
        d = self.config
        for key in keys[:-1]:
            d = d.setdefault( key, {} )
        d[keys[-1]] = value
