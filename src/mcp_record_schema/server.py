"""
MCP Server for record schema tools
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Dict

from mcp.server import Server, NotificationOptions
from mcp.server.stdio import stdio_server
from mcp.server.models import InitializationOptions
import mcp.types as types

from . import __version__
from .bootstrap import create_tables
from .config import configure_logging, settings
from .errors import DatabaseOpenError
from .schema_converter import SchemaConverter
from .schema_models import records_from_document
from .schema_validator import SchemaValidator

logger = logging.getLogger(__name__)

SCHEMA_CONTENT_PROPERTY = {
    "type": "string",
    "description": "Record document JSON content or file path",
}


class DBSchemaServer:
    def __init__(self):
        self.server = Server("mcp-record-schema")
        self.converter = SchemaConverter()
        self.validator = SchemaValidator()
        self.setup_handlers()

    def setup_handlers(self):
        @self.server.list_tools()
        async def handle_list_tools() -> list[types.Tool]:
            """List available tools"""
            return [
                types.Tool(
                    name="records_to_sql",
                    description="Convert record definitions to SQLite CREATE TABLE statements",
                    inputSchema={
                        "type": "object",
                        "properties": {
                            "schema_content": SCHEMA_CONTENT_PROPERTY,
                            "output_file": {
                                "type": "string",
                                "description": "Optional output SQL file path"
                            }
                        },
                        "required": ["schema_content"]
                    }
                ),
                types.Tool(
                    name="validate_records",
                    description="Validate record definitions before creating tables",
                    inputSchema={
                        "type": "object",
                        "properties": {
                            "schema_content": SCHEMA_CONTENT_PROPERTY
                        },
                        "required": ["schema_content"]
                    }
                ),
                types.Tool(
                    name="create_tables_from_records",
                    description="Create one SQLite table per record definition (idempotent)",
                    inputSchema={
                        "type": "object",
                        "properties": {
                            "schema_content": SCHEMA_CONTENT_PROPERTY,
                            "db_path": {
                                "type": "string",
                                "description": f"SQLite database file path (defaults to {settings.DB_PATH})"
                            }
                        },
                        "required": ["schema_content"]
                    }
                )
            ]

        @self.server.call_tool()
        async def handle_call_tool(
            name: str, arguments: Dict[str, Any]
        ) -> list[types.TextContent]:
            """Handle tool calls"""
            return await self.dispatch(name, arguments)

    async def dispatch(self, name: str, arguments: Dict[str, Any]) -> list[types.TextContent]:
        try:
            if name == "records_to_sql":
                return await self._handle_records_to_sql(arguments)
            elif name == "validate_records":
                return await self._handle_validate_records(arguments)
            elif name == "create_tables_from_records":
                return await self._handle_create_tables(arguments)
            else:
                return [types.TextContent(type="text", text=f"Unknown tool: {name}")]
        except Exception as e:
            logger.exception("Tool '%s' failed", name)
            return [types.TextContent(type="text", text=f"Error: {str(e)}")]

    async def _handle_records_to_sql(self, arguments: Dict[str, Any]) -> list[types.TextContent]:
        """Convert record definitions to SQL DDL"""
        document = self._load_document(arguments["schema_content"])
        output_file = arguments.get("output_file")

        records = records_from_document(document)
        sql_statements = self.converter.records_to_sql(records)

        if output_file:
            Path(output_file).write_text(sql_statements, encoding="utf-8")
            result_text = f"✅ **SQLite DDL generated and saved to:** {output_file}\n\n"
        else:
            result_text = "✅ **SQLite DDL generated:**\n\n"

        result_text += f"```sql\n{sql_statements}\n```"

        return [types.TextContent(type="text", text=result_text)]

    async def _handle_validate_records(self, arguments: Dict[str, Any]) -> list[types.TextContent]:
        """Validate record definitions"""
        document = self._load_document(arguments["schema_content"])

        validation_result = self.validator.validate_records(document)
        result_text = self._format_validation(validation_result)

        return [types.TextContent(type="text", text=result_text)]

    async def _handle_create_tables(self, arguments: Dict[str, Any]) -> list[types.TextContent]:
        """Create tables in a SQLite file from record definitions"""
        document = self._load_document(arguments["schema_content"])
        db_path = arguments.get("db_path") or settings.DB_PATH

        validation_result = self.validator.validate_records(document)
        if not validation_result["is_valid"]:
            return [types.TextContent(type="text", text=self._format_validation(validation_result))]

        try:
            result = create_tables(db_path, records_from_document(document))
        except DatabaseOpenError as e:
            return [types.TextContent(type="text", text=f"❌ **Database open failed:** {e}")]

        result_text = f"📁 **Database:** {result['db_path']}\n"
        result_text += f"📊 **Tables created:** {result['tables_created']}\n"

        if result["tables"]:
            result_text += "\n📋 **Table List:**\n"
            for table in result["tables"]:
                result_text += f"- **{table}**\n"

        if result["errors"]:
            result_text += f"\n❌ **Failed tables ({len(result['errors'])}):**\n"
            for error in result["errors"]:
                result_text += f"- **{error['table']}**: {error['error']}\n"

        return [types.TextContent(type="text", text=result_text)]

    def _format_validation(self, validation_result: Dict[str, Any]) -> str:
        if validation_result["is_valid"]:
            result_text = "✅ **Record validation passed!**\n\n"
            result_text += "📊 **Summary:**\n"
            result_text += f"- Records: {validation_result['record_count']}\n"
            result_text += f"- Fields: {validation_result['total_fields']}\n"
        else:
            result_text = "❌ **Record validation failed!**\n\n"
            result_text += f"🚨 **Errors found ({len(validation_result['errors'])}):**\n"
            for error in validation_result["errors"]:
                result_text += f"- {error}\n"

        if validation_result.get("warnings"):
            result_text += f"\n⚠️ **Warnings ({len(validation_result['warnings'])}):**\n"
            for warning in validation_result["warnings"]:
                result_text += f"- {warning}\n"

        return result_text

    def _load_document(self, schema_content: str) -> Dict[str, Any]:
        """Load record document from content or file path"""
        # Try to parse as JSON first
        try:
            return json.loads(schema_content)
        except json.JSONDecodeError:
            # Assume it's a file path
            schema_path = Path(schema_content)
            if schema_path.exists():
                return json.loads(schema_path.read_text(encoding="utf-8"))
            else:
                raise FileNotFoundError(f"Record document not found: {schema_content}")


async def main():
    """Main entry point"""
    configure_logging()
    server_instance = DBSchemaServer()

    # Run the server using stdio transport
    async with stdio_server() as (read_stream, write_stream):
        await server_instance.server.run(
            read_stream,
            write_stream,
            InitializationOptions(
                server_name="mcp-record-schema",
                server_version=__version__,
                capabilities=server_instance.server.get_capabilities(
                    notification_options=NotificationOptions(),
                    experimental_capabilities={},
                ),
            ),
        )


def run():
    asyncio.run(main())


if __name__ == "__main__":
    run()
