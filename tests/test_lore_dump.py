"""
Tests for lore_dump - YAML views of lines and trees.
"""

import pytest
import yaml

from lore_dump import dump_lines, dump_nodes, dump_report, line_info, main, node_info
from lore_line import Link, PlaceHolder, parse_lines
from lore_tree import into_nodes


TEXT = '+ A > B\n  x = y\n  + C\n    text\n#'


class TestInfo:

    def test_line_info( self ):
        assert line_info( Link( 'x', 'y', 1 ) ) == { 'kind': 'link', 'indent': 1, 'name': 'x', 'value': 'y' }
        assert line_info( PlaceHolder( 2 ) ) == { 'kind': 'placeholder', 'indent': 2 }

    def test_node_info( self ):
        nodes = into_nodes( parse_lines( TEXT ) )
        assert node_info( nodes[0] ) == {
            'kind': 'domain',
            'category': 'Category2',
            'name': 'A',
            'value': 'B',
            'rails': [
                { 'kind': 'rail', 'name': 'x', 'value': 'y' },
                { 'kind': 'domain', 'category': 'Category1', 'name': 'C', 'rails': [
                    { 'kind': 'element', 'text': 'text' },
                ] },
            ],
        }
        assert node_info( nodes[1] ) == { 'kind': 'placeholder' }


class TestDump:

    def test_dump_lines_is_yaml( self ):
        data = yaml.safe_load( dump_lines( parse_lines( TEXT ) ) )
        assert [ item['kind'] for item in data ] == [ 'reference', 'link', 'domain', 'atom', 'placeholder' ]
        assert data[3] == { 'kind': 'atom', 'indent': 2, 'text': 'text' }

    def test_dump_nodes_keeps_key_order( self ):
        text = dump_nodes( into_nodes( parse_lines( '+ D' ) ) )
        assert text == '- kind: domain\n  category: Category1\n  name: D\n  rails: []\n'

    def test_dump_nodes_unicode( self ):
        assert '领域' in dump_nodes( into_nodes( parse_lines( '+ 领域' ) ) )

    def test_report( self ):
        lines = parse_lines( TEXT )
        report = dump_report( lines, into_nodes( lines ) )
        assert report.startswith( '+ A > B\n  x = y\n  + C\n    text\n#\n\n' )
        assert 'Root has 2 top-level nodes\n' in report
        assert 'Top-level node 0 has depth 2\n' in report
        assert report.endswith( 'Top-level node 1 has depth 0\n' )


class TestMain:

    def test_dump_tree( self, tmp_path, capsys ):
        path = tmp_path / 'x.lore'
        path.write_text( TEXT, encoding = 'utf-8' )
        assert main( [ str( path ) ] ) == 0
        data = yaml.safe_load( capsys.readouterr().out )
        assert [ item['kind'] for item in data ] == [ 'domain', 'placeholder' ]

    def test_dump_lines( self, tmp_path, capsys ):
        path = tmp_path / 'x.lore'
        path.write_text( TEXT, encoding = 'utf-8' )
        assert main( [ '--lines', str( path ) ] ) == 0
        assert len( yaml.safe_load( capsys.readouterr().out ) ) == 5

    def test_missing_file( self, tmp_path, capsys ):
        assert main( [ str( tmp_path / 'missing.lore' ) ] ) == 1
        captured = capsys.readouterr()
        assert captured.err.startswith( 'Error reading from file' )
        assert 'missing.lore' in captured.err
        assert captured.out == ''

    def test_not_utf8( self, tmp_path, capsys ):
        path = tmp_path / 'bad.lore'
        path.write_bytes( b'+ caf\xe9\n' )
        assert main( [ str( path ) ] ) == 1
        assert 'not valid UTF-8' in capsys.readouterr().err

    def test_wrong_argument_count( self, capsys ):
        with pytest.raises( SystemExit ) as info:
            main( [] )
        assert info.value.code == 2
        assert 'error: invalid number arguments' in capsys.readouterr().err
