from status_service.server import main

main()
