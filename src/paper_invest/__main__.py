from src.paper_invest.main import main

main()
