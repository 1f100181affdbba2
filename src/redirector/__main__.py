from redirector.cli import main

main()
