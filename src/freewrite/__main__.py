from freewrite.adapters.textual.app import main

main()
