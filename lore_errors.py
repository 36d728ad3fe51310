
class LoreError( Exception ):
    action = 'processing'

    def __init__( self, path, reason ):
        super().__init__( path, reason )
        self.path = path
        self.reason = reason

    def __str__( self ):
        return f'Error {self.action} file {self.path}: {self.reason}'

class ReadError( LoreError ):
    action = 'reading from'

class WriteError( LoreError ):
    action = 'writing to'

class ConfigError( LoreError ):
    action = 'loading config'
