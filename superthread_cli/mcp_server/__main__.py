from superthread_cli.mcp_server import main

main()
