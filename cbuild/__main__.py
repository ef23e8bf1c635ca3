from cbuild.core.main import main

main()
