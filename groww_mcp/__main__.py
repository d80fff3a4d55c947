from groww_mcp.server import main

main()
