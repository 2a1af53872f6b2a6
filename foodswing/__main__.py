from foodswing.app import main

main()
