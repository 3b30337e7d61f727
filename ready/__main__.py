from ready.cli import main

main()
